from abc import abstractmethod

from travel_core.account.domain.entity import User
from travel_core.account.domain.value_object import UserId
from travel_core.shared.domain import DurabilityLevel, Repository


class UserRepository(Repository[User, UserId]):
    """ユーザーリポジトリのインターフェース

    Domain 層で定義し、具象実装は Infrastructure 層で行う。
    """

    @abstractmethod
    def find_by_id(self, user_id: UserId) -> User | None:
        """ユーザーキーで検索する"""
        raise NotImplementedError

    @abstractmethod
    def add(
        self, user: User, durability: DurabilityLevel = DurabilityLevel.NONE
    ) -> None:
        """新規ユーザーを登録する（既存キーがあれば DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def save(self, user: User) -> None:
        """ユーザードキュメント全体を上書きする（後勝ち）"""
        raise NotImplementedError

    @abstractmethod
    def update(self, user: User, expected_revision: int) -> None:
        """リビジョンが一致する場合のみ上書きする（OptimisticLockException）"""
        raise NotImplementedError
