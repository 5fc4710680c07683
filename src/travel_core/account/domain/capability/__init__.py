from .password_hasher import PasswordHasher as PasswordHasher
from .token_issuer import TokenIssuer as TokenIssuer
