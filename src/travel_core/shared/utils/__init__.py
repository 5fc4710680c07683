from .logger import get_logger as get_logger
from .validators import replace_floats as replace_floats
from .validators import to_decimal as to_decimal
