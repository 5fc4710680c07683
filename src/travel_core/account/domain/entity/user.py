from __future__ import annotations

from typing import Any

from travel_core.account.domain.value_object import UserId
from travel_core.shared.domain import Entity

DOCUMENT_TYPE = "user"


class User(Entity[UserId]):
    """ユーザーエンティティ

    - name は作成後に変更できない
    - flights はフライトドキュメントのキーを予約順に保持する（未設定もあり得る）
    - 未知のフィールドは読み書きの往復で保持する
    """

    def __init__(
        self,
        id: UserId,
        name: str,
        password_hash: str,
        flights: list[str] | None = None,
        revision: int | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(id)
        self._name = name
        self._password_hash = password_hash
        self._flights = list(flights) if flights is not None else None
        self._revision = revision
        self._attributes = dict(attributes or {})

    @classmethod
    def create(cls, username: str, password_hash: str) -> User:
        """新規登録用のユーザーを生成する"""
        return cls(
            id=UserId.from_username(username),
            name=username,
            password_hash=password_hash,
        )

    @classmethod
    def from_dict(cls, document: dict[str, Any], revision: int | None = None) -> User:
        """永続化されたドキュメントからエンティティを復元する"""
        attributes = {
            k: v
            for k, v in document.items()
            if k not in ("type", "name", "password", "flights")
        }
        return cls(
            id=UserId.from_username(document["name"]),
            name=document["name"],
            password_hash=document["password"],
            flights=document.get("flights"),
            revision=revision,
            attributes=attributes,
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def flights(self) -> list[str]:
        return list(self._flights or [])

    @property
    def revision(self) -> int | None:
        return self._revision

    def add_flights(self, flight_ids: list[str]) -> None:
        """予約したフライトのキーを末尾に追加する（空でも flights を確定させる）"""
        self._flights = [*(self._flights or []), *flight_ids]

    def to_dict(self) -> dict[str, Any]:
        """永続化用の辞書表現を返す"""
        document: dict[str, Any] = {
            **self._attributes,
            "type": DOCUMENT_TYPE,
            "name": self._name,
            "password": self._password_hash,
        }
        if self._flights is not None:
            document["flights"] = list(self._flights)
        return document
