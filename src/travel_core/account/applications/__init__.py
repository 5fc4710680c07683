from .create_login import CreateLoginService as CreateLoginService
from .login import LoginService as LoginService
