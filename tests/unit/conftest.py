import copy
from typing import Any
from unittest.mock import MagicMock

import pytest

from travel_core.account.infrastructure import HmacTokenIssuer, Pbkdf2PasswordHasher
from travel_core.container import create_travel_core
from travel_core.shared.domain import (
    DocumentStore,
    DuplicateResourceException,
    DurabilityLevel,
    OptimisticLockException,
    StoredDocument,
)


class InMemoryDocumentStore(DocumentStore):
    """テスト用のインメモリ DocumentStore

    書き込みごとに (操作, namespace, key, durability) を writes に記録する。
    """

    def __init__(self) -> None:
        self.documents: dict[tuple[str, str], StoredDocument] = {}
        self.writes: list[tuple[str, str, str, DurabilityLevel | None]] = []

    @property
    def name(self) -> str:
        return "memory"

    def get(self, namespace: str, key: str) -> StoredDocument | None:
        stored = self.documents.get((namespace, key))
        if stored is None:
            return None
        return StoredDocument(copy.deepcopy(stored.content), stored.revision)

    def insert(
        self,
        namespace: str,
        key: str,
        document: dict[str, Any],
        durability: DurabilityLevel = DurabilityLevel.NONE,
    ) -> None:
        if (namespace, key) in self.documents:
            raise DuplicateResourceException(f"Document already exists: {key}")
        self.writes.append(("insert", namespace, key, durability))
        self.documents[(namespace, key)] = StoredDocument(copy.deepcopy(document), 1)

    def upsert(
        self,
        namespace: str,
        key: str,
        document: dict[str, Any],
        durability: DurabilityLevel = DurabilityLevel.NONE,
    ) -> None:
        self.writes.append(("upsert", namespace, key, durability))
        self._put(namespace, key, document)

    def replace(
        self,
        namespace: str,
        key: str,
        document: dict[str, Any],
        expected_revision: int,
    ) -> None:
        stored = self.documents.get((namespace, key))
        if stored is None or stored.revision != expected_revision:
            raise OptimisticLockException(f"Document revision conflict: key={key}")
        self.writes.append(("replace", namespace, key, None))
        self._put(namespace, key, document)

    def _put(self, namespace: str, key: str, document: dict[str, Any]) -> None:
        stored = self.documents.get((namespace, key))
        revision = stored.revision + 1 if stored else 1
        self.documents[(namespace, key)] = StoredDocument(
            copy.deepcopy(document), revision
        )


@pytest.fixture
def store():
    """インメモリ DocumentStore フィクスチャ"""
    return InMemoryDocumentStore()


@pytest.fixture
def hasher():
    """テスト高速化のため反復回数を下げたハッシャー"""
    return Pbkdf2PasswordHasher(iterations=1_000)


@pytest.fixture
def token_issuer():
    return HmacTokenIssuer(secret="test-secret", ttl_seconds=3600)


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def travel_core(store, hasher, token_issuer):
    """インメモリストアで組み立てた TravelCore"""
    return create_travel_core(
        store=store,
        hasher=hasher,
        token_issuer=token_issuer,
        booked_on="travel-core-test",
    )


@pytest.fixture
def create_flight_payload():
    """フライトペイロードを生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        name: str = "Lufthansa",
        date: str = "05/24/2026 11:10:00",
        sourceairport: str = "SFO",
        destinationairport: str = "LAX",
        **extra: Any,
    ) -> dict[str, Any]:
        return {
            "name": name,
            "date": date,
            "sourceairport": sourceairport,
            "destinationairport": destinationairport,
            **extra,
        }

    return _factory
