from travel_core.account.domain.entity import User
from travel_core.account.domain.repository import UserRepository
from travel_core.account.domain.value_object import UserId
from travel_core.shared.domain import DocumentStore, DurabilityLevel

USERS_COLLECTION = "users"


class DocumentUserRepository(UserRepository):
    """DocumentStore の users コレクションを使用した UserRepository の具象実装"""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    @property
    def location(self) -> str:
        return f"{self._store.name} collection {USERS_COLLECTION}"

    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーキーで検索"""
        document = self._store.get(USERS_COLLECTION, str(user_id))
        if document is None:
            return None
        return User.from_dict(document.content, revision=document.revision)

    def add(
        self, user: User, durability: DurabilityLevel = DurabilityLevel.NONE
    ) -> None:
        """ユーザーを新規登録する"""
        self._store.insert(
            USERS_COLLECTION, str(user.id), user.to_dict(), durability=durability
        )

    def save(self, user: User) -> None:
        """ユーザードキュメントを上書きする"""
        self._store.upsert(USERS_COLLECTION, str(user.id), user.to_dict())

    def update(self, user: User, expected_revision: int) -> None:
        """リビジョンを条件にユーザードキュメントを上書きする"""
        self._store.replace(
            USERS_COLLECTION,
            str(user.id),
            user.to_dict(),
            expected_revision=expected_revision,
        )
