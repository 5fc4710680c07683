from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")
ID = TypeVar("ID")


class Repository(ABC, Generic[T, ID]):
    """Repository 基底クラス

    - ドキュメント単位の永続化を抽象化する
    - location はナレーションに使う格納先の説明
    """

    @property
    @abstractmethod
    def location(self) -> str:
        """格納先（ストア名とコレクション名）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, id: ID) -> T | None:
        """IDでドキュメントを検索する"""
        raise NotImplementedError
