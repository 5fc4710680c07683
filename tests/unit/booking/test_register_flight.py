from unittest.mock import MagicMock

import pytest

from travel_core.account.domain.entity.user import User
from travel_core.account.infrastructure.document_user_repository import (
    DocumentUserRepository,
)
from travel_core.booking.applications.register_flight import RegisterFlightService
from travel_core.booking.domain.factory.flight_factory import FlightFactory
from travel_core.booking.infrastructure.document_flight_repository import (
    DocumentFlightRepository,
)
from travel_core.shared.domain import Result
from travel_core.shared.domain.exception.exceptions import (
    DuplicateResourceException,
    InvalidFlightPayloadException,
    InvalidPayloadException,
    OptimisticLockException,
    UserNotFoundException,
)


class TestRegisterFlightService:
    """RegisterFlightService のテスト"""

    @pytest.fixture
    def user_repository(self, store):
        repository = DocumentUserRepository(store)
        repository.add(User.create("alice", "hashed"))
        return repository

    @pytest.fixture
    def flight_repository(self, store):
        return DocumentFlightRepository(store)

    @pytest.fixture
    def create_service(self, user_repository, flight_repository):
        def _factory(max_conflict_retries: int | None = None) -> RegisterFlightService:
            return RegisterFlightService(
                user_repository,
                flight_repository,
                FlightFactory("travel-core-test"),
                max_conflict_retries=max_conflict_retries,
            )

        return _factory

    def _stored_flight_keys(self, store) -> list[str]:
        return [key for namespace, key in store.documents if namespace == "flights"]

    def test_register_inserts_flights_and_updates_user(
        self, create_service, store, create_flight_payload
    ):
        # Arrange
        service = create_service()
        first = create_flight_payload(name="Lufthansa")
        second = create_flight_payload(name="Delta", price=120.5)

        # Act
        result = service.register_flight_for_user("alice", [first, second])

        # Assert
        assert isinstance(result, Result)
        assert result.narration == "Booked flight in document user::alice"
        assert result.payload["added"] == [
            {**first, "bookedon": "travel-core-test"},
            {**second, "bookedon": "travel-core-test"},
        ]

        user_document = store.get("users", "user::alice").content
        assert user_document["flights"] == self._stored_flight_keys(store)
        assert all(key.startswith("flight::") for key in user_document["flights"])
        assert [op for op, *_ in store.writes[1:]] == ["insert", "insert", "upsert"]

    def test_caller_payload_is_not_mutated(self, create_service, create_flight_payload):
        payload = create_flight_payload()

        create_service().register_flight_for_user("alice", [payload])

        assert "bookedon" not in payload

    def test_empty_list_upserts_user_unchanged(self, create_service, store):
        service = create_service()

        result = service.register_flight_for_user("alice", [])

        assert result.payload == {"added": []}
        assert self._stored_flight_keys(store) == []
        assert store.get("users", "user::alice").content["flights"] == []
        assert store.writes[-1][0] == "upsert"

    def test_missing_user_raises(self, create_service, create_flight_payload):
        with pytest.raises(UserNotFoundException):
            create_service().register_flight_for_user(
                "nobody", [create_flight_payload()]
            )

    def test_none_payload_raises(self, create_service):
        with pytest.raises(InvalidPayloadException, match="No flights in payload"):
            create_service().register_flight_for_user("alice", None)

    def test_non_sequence_payload_raises(self, create_service, create_flight_payload):
        with pytest.raises(InvalidPayloadException, match="No flights in payload"):
            create_service().register_flight_for_user(
                "alice", create_flight_payload()
            )

    def test_malformed_flight_aborts_without_rollback(
        self, create_service, store, create_flight_payload
    ):
        """2件目が不正な場合、1件目のフライトは残りユーザーは更新されない"""

        # Arrange
        service = create_service()
        valid = create_flight_payload()
        malformed = create_flight_payload()
        del malformed["date"]

        # Act
        with pytest.raises(
            InvalidFlightPayloadException, match="Malformed flight inside flights payload"
        ):
            service.register_flight_for_user("alice", [valid, malformed])

        # Assert
        orphaned = self._stored_flight_keys(store)
        assert len(orphaned) == 1
        assert store.get("flights", orphaned[0]).content == {
            **valid,
            "bookedon": "travel-core-test",
        }
        assert "flights" not in store.get("users", "user::alice").content

    def test_flight_id_collision_is_fatal(
        self, user_repository, create_flight_payload
    ):
        flight_repository = MagicMock()
        flight_repository.add.side_effect = DuplicateResourceException("collision")
        service = RegisterFlightService(
            user_repository, flight_repository, FlightFactory("travel-core-test")
        )

        with pytest.raises(DuplicateResourceException):
            service.register_flight_for_user("alice", [create_flight_payload()])
        flight_repository.add.assert_called_once()

    def test_default_mode_loses_concurrent_update(
        self, create_service, user_repository, store, create_flight_payload
    ):
        """既定では後勝ちの上書きで並行予約が失われる"""
        service = create_service()
        user_repository.find_by_id = _interleave_booking(
            user_repository, store, "flight::concurrent"
        )

        service.register_flight_for_user("alice", [create_flight_payload()])

        flights = store.get("users", "user::alice").content["flights"]
        assert "flight::concurrent" not in flights
        assert len(flights) == 1

    def test_optimistic_mode_merges_concurrent_update(
        self, create_service, user_repository, store, create_flight_payload
    ):
        """楽観ロック有効時は競合を検出し、最新の flights に追加し直す"""
        service = create_service(max_conflict_retries=2)
        user_repository.find_by_id = _interleave_booking(
            user_repository, store, "flight::concurrent"
        )

        result = service.register_flight_for_user("alice", [create_flight_payload()])

        flights = store.get("users", "user::alice").content["flights"]
        assert flights[0] == "flight::concurrent"
        assert len(flights) == 2
        assert len(result.payload["added"]) == 1
        assert len(self._stored_flight_keys(store)) == 1

    def test_optimistic_mode_gives_up_after_retries(
        self, user_repository, flight_repository, create_flight_payload
    ):
        user_repository.update = MagicMock(
            side_effect=OptimisticLockException("conflict")
        )
        service = RegisterFlightService(
            user_repository,
            flight_repository,
            FlightFactory("travel-core-test"),
            max_conflict_retries=1,
        )

        with pytest.raises(OptimisticLockException):
            service.register_flight_for_user("alice", [create_flight_payload()])
        assert user_repository.update.call_count == 2


def _interleave_booking(user_repository, store, flight_id):
    """初回の読み込み直後に別の予約がユーザーを更新したことにする"""
    original = user_repository.find_by_id
    calls = {"count": 0}

    def _find_by_id(user_id):
        user = original(user_id)
        calls["count"] += 1
        if calls["count"] == 1:
            concurrent = original(user_id)
            concurrent.add_flights([flight_id])
            store.upsert("users", str(user_id), concurrent.to_dict())
        return user

    return _find_by_id
