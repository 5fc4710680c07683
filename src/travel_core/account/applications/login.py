from travel_core.account.domain.capability import PasswordHasher, TokenIssuer
from travel_core.account.domain.repository import UserRepository
from travel_core.account.domain.value_object import UserId
from travel_core.shared.domain import AuthenticationFailedException
from travel_core.shared.utils import get_logger

logger = get_logger("account-service")

BAD_CREDENTIALS_MESSAGE = "Bad Username or Password"


class LoginService:
    """ログインサービス

    ユーザー不在とパスワード不一致は同じ例外・同じメッセージで返し、
    ユーザーの存在有無を外部に漏らさない。
    ユーザー不在時もダミーのハッシュで検証を行い、応答時間を揃える。
    """

    def __init__(
        self,
        repository: UserRepository,
        hasher: PasswordHasher,
        token_issuer: TokenIssuer,
    ) -> None:
        self._repository = repository
        self._hasher = hasher
        self._token_issuer = token_issuer
        self._dummy_hash: str | None = None

    def login(self, username: str, password: str) -> dict:
        """認証に成功したらトークンを返す"""
        user = self._repository.find_by_id(UserId.from_username(username))
        if user is None:
            self._hasher.verify(password, self._get_dummy_hash())
        if user is None or not self._hasher.verify(password, user.password_hash):
            logger.info("Login rejected", extra={"username": username})
            raise AuthenticationFailedException(BAD_CREDENTIALS_MESSAGE)

        return {"token": self._token_issuer.issue(username)}

    def _get_dummy_hash(self) -> str:
        if self._dummy_hash is None:
            self._dummy_hash = self._hasher.hash(BAD_CREDENTIALS_MESSAGE)
        return self._dummy_hash
