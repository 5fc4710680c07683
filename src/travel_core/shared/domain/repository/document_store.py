from abc import ABC, abstractmethod
from typing import Any

from travel_core.shared.domain.value_object import DurabilityLevel, StoredDocument


class DocumentStore(ABC):
    """キー指定で読み書きするドキュメントストアのインターフェース

    - namespace（コレクション）ごとにキー空間が分かれる
    - 複数ドキュメントにまたがるトランザクションは提供しない
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """ナレーション用の格納先の名前"""
        raise NotImplementedError

    @abstractmethod
    def get(self, namespace: str, key: str) -> StoredDocument | None:
        """キーでドキュメントを取得する"""
        raise NotImplementedError

    @abstractmethod
    def insert(
        self,
        namespace: str,
        key: str,
        document: dict[str, Any],
        durability: DurabilityLevel = DurabilityLevel.NONE,
    ) -> None:
        """新規ドキュメントを書き込む

        Raises:
            DuplicateResourceException: 同じキーが既に存在する場合
        """
        raise NotImplementedError

    @abstractmethod
    def upsert(
        self,
        namespace: str,
        key: str,
        document: dict[str, Any],
        durability: DurabilityLevel = DurabilityLevel.NONE,
    ) -> None:
        """ドキュメント全体を置き換える（存在しなければ作成）"""
        raise NotImplementedError

    @abstractmethod
    def replace(
        self,
        namespace: str,
        key: str,
        document: dict[str, Any],
        expected_revision: int,
    ) -> None:
        """リビジョンが一致する場合のみドキュメントを置き換える

        Raises:
            OptimisticLockException: リビジョンが一致しない、または存在しない場合
        """
        raise NotImplementedError
