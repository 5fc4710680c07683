from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Result:
    """更新系オペレーションの戻り値

    機械処理用のペイロードと、何をどこに書き込んだかを説明する
    ナレーション文字列の組。
    """

    payload: dict[str, Any] = field(default_factory=dict)
    narration: str = ""

    @classmethod
    def of(cls, payload: dict[str, Any], narration: str) -> Result:
        return cls(payload=payload, narration=narration)
