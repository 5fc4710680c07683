from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class UserId:
    """ユーザードキュメントのキー

    例: "user::alice"
    """

    value: str

    PREFIX: ClassVar[str] = "user::"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_username(cls, username: str) -> UserId:
        """ユーザー名から決定的なキーを生成"""
        return cls(value=f"{cls.PREFIX}{username}")
