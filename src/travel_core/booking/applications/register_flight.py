from travel_core.account.domain.entity import User
from travel_core.account.domain.repository import UserRepository
from travel_core.account.domain.value_object import UserId
from travel_core.booking.domain.factory import FlightFactory
from travel_core.booking.domain.repository import FlightRepository
from travel_core.shared.domain import (
    InvalidPayloadException,
    OptimisticLockException,
    Result,
    UserNotFoundException,
)
from travel_core.shared.utils import get_logger

logger = get_logger("booking-service")


class RegisterFlightService:
    """フライト予約サービス

    フライトドキュメントを1件ずつ挿入した後、ユーザードキュメントの
    flights を更新する。複数ドキュメントにまたがるトランザクションはなく、
    途中で失敗しても挿入済みのフライトはロールバックしない。

    max_conflict_retries を指定するとユーザー更新をリビジョン条件付きで行い、
    競合時は再読み込みして追加分を適用し直す。None の場合は後勝ちで上書きする。
    """

    def __init__(
        self,
        user_repository: UserRepository,
        flight_repository: FlightRepository,
        factory: FlightFactory,
        max_conflict_retries: int | None = None,
    ) -> None:
        self._user_repository = user_repository
        self._flight_repository = flight_repository
        self._factory = factory
        self._max_conflict_retries = max_conflict_retries

    def register_flight_for_user(self, username: str, new_flights: object) -> Result:
        """ユーザーにフライトを予約する"""
        user_id = UserId.from_username(username)
        user = self._user_repository.find_by_id(user_id)
        if user is None:
            raise UserNotFoundException(f"User not found: {user_id}")

        if not isinstance(new_flights, (list, tuple)):
            raise InvalidPayloadException("No flights in payload")

        added: list[dict] = []
        flight_ids: list[str] = []
        for payload in new_flights:
            flight = self._factory.create(payload)
            self._flight_repository.add(flight)
            flight_ids.append(str(flight.id))
            added.append(flight.to_dict())
            logger.info(
                "Flight document inserted",
                extra={"user_id": str(user_id), "flight_id": str(flight.id)},
            )

        user.add_flights(flight_ids)
        self._save(user, flight_ids)

        return Result.of({"added": added}, f"Booked flight in document {user.id}")

    def _save(self, user: User, flight_ids: list[str]) -> None:
        if self._max_conflict_retries is None:
            self._user_repository.save(user)
            return

        attempt = 0
        while True:
            try:
                self._user_repository.update(user, expected_revision=user.revision)
                return
            except OptimisticLockException:
                if attempt >= self._max_conflict_retries:
                    logger.exception(
                        "User update conflict retries exhausted",
                        extra={"user_id": str(user.id), "flight_ids": flight_ids},
                    )
                    raise
                attempt += 1
                logger.warning(
                    "User update conflict, retrying",
                    extra={"user_id": str(user.id), "attempt": attempt},
                )

            latest = self._user_repository.find_by_id(user.id)
            if latest is None:
                raise UserNotFoundException(f"User not found: {user.id}")
            latest.add_flights(flight_ids)
            user = latest
