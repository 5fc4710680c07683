from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FlightId:
    """フライトドキュメントのキー

    例: "flight::0b6f3c1e-..."
    """

    value: str

    PREFIX: ClassVar[str] = "flight::"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def generate(cls) -> FlightId:
        """新しい一意なキーを生成"""
        return cls(value=f"{cls.PREFIX}{uuid.uuid4()}")
