from travel_core.account.domain.capability import PasswordHasher, TokenIssuer
from travel_core.account.domain.entity import User
from travel_core.account.domain.repository import UserRepository
from travel_core.shared.domain import (
    AccountCreationFailedException,
    DurabilityLevel,
    Result,
)
from travel_core.shared.utils import get_logger

logger = get_logger("account-service")


class CreateLoginService:
    """アカウント作成サービス

    事前の存在確認は行わず、insert のキー重複検出に任せる。
    失敗原因（重複・通信エラー）は呼び出し側に区別して返さない。
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

    def create_login(
        self,
        username: str,
        password: str,
        durability: DurabilityLevel = DurabilityLevel.NONE,
    ) -> Result:
        """アカウントを作成し、トークンとナレーションを返す"""
        user = User.create(username, self._hasher.hash(password))

        # トークン発行の失敗も作成失敗として扱う（ドキュメントは書き込み済みのまま残る）
        try:
            self._repository.add(user, durability=durability)
            token = self._token_issuer.issue(username)
        except Exception as e:
            logger.exception("Failed to create account", extra={"username": username})
            raise AccountCreationFailedException(
                "There was an error creating account"
            ) from e

        logger.info(
            "Account created",
            extra={"username": username, "durability": durability.value},
        )
        return Result.of({"token": token}, self._narrate(user, durability))

    def _narrate(self, user: User, durability: DurabilityLevel) -> str:
        narration = (
            f"User account created in document {user.id} "
            f"in {self._repository.location}"
        )
        if not durability.is_default:
            narration += f", with durability level {durability.value}"
        return narration
