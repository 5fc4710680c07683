from travel_core.account.domain.repository import UserRepository
from travel_core.account.domain.value_object import UserId
from travel_core.booking.domain.repository import FlightRepository
from travel_core.booking.domain.value_object import FlightId
from travel_core.shared.domain import DataConsistencyException
from travel_core.shared.utils import get_logger

logger = get_logger("booking-service")


class GetFlightsService:
    """予約済みフライト取得サービス"""

    def __init__(
        self, user_repository: UserRepository, flight_repository: FlightRepository
    ) -> None:
        self._user_repository = user_repository
        self._flight_repository = flight_repository

    def get_flights_for_user(self, username: str) -> list[dict]:
        """ユーザーの flights に保存されたキーを予約順にフライトへ解決する

        ユーザーが存在しない場合は空リストを返す。
        参照先が欠けている場合は部分的な結果を返さず DataConsistencyException を送出する。
        """
        user = self._user_repository.find_by_id(UserId.from_username(username))
        if user is None:
            return []

        flights: list[dict] = []
        for flight_id in user.flights:
            flight = self._flight_repository.find_by_id(FlightId(value=flight_id))
            if flight is None:
                logger.error(
                    "Dangling flight reference",
                    extra={"user_id": str(user.id), "flight_id": flight_id},
                )
                raise DataConsistencyException(
                    f"Unable to retrieve flight id {flight_id}"
                )
            flights.append(flight.to_dict())
        return flights
