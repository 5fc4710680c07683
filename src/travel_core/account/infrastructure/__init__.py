from .document_user_repository import DocumentUserRepository as DocumentUserRepository
from .hmac_token_issuer import HmacTokenIssuer as HmacTokenIssuer
from .pbkdf2_password_hasher import Pbkdf2PasswordHasher as Pbkdf2PasswordHasher
