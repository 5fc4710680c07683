from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class StoredDocument:
    """ストアから取得したドキュメント本体とリビジョン"""

    content: dict[str, Any]
    revision: int
