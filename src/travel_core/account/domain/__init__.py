from .capability import PasswordHasher as PasswordHasher
from .capability import TokenIssuer as TokenIssuer
from .entity import User as User
from .repository import UserRepository as UserRepository
from .value_object import UserId as UserId
