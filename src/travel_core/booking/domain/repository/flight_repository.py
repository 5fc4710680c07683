from abc import abstractmethod

from travel_core.booking.domain.entity import Flight
from travel_core.booking.domain.value_object import FlightId
from travel_core.shared.domain import Repository


class FlightRepository(Repository[Flight, FlightId]):
    """フライトリポジトリのインターフェース"""

    @abstractmethod
    def add(self, flight: Flight) -> None:
        """新規フライトを登録する（キー衝突時は DuplicateResourceException）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトキーで検索する"""
        raise NotImplementedError
