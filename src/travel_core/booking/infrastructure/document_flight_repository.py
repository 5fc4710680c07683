from travel_core.booking.domain.entity import Flight
from travel_core.booking.domain.repository import FlightRepository
from travel_core.booking.domain.value_object import FlightId
from travel_core.shared.domain import DocumentStore

FLIGHTS_COLLECTION = "flights"


class DocumentFlightRepository(FlightRepository):
    """DocumentStore の flights コレクションを使用した FlightRepository の具象実装"""

    def __init__(self, store: DocumentStore) -> None:
        self._store = store

    @property
    def location(self) -> str:
        return f"{self._store.name} collection {FLIGHTS_COLLECTION}"

    def add(self, flight: Flight) -> None:
        """フライトを新規登録する"""
        self._store.insert(FLIGHTS_COLLECTION, str(flight.id), flight.to_dict())

    def find_by_id(self, flight_id: FlightId) -> Flight | None:
        """フライトキーで検索"""
        document = self._store.get(FLIGHTS_COLLECTION, str(flight_id))
        if document is None:
            return None
        return Flight(id=flight_id, attributes=document.content)
