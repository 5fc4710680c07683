from typing import Any

from travel_core.booking.domain.value_object import FlightId
from travel_core.shared.domain import Entity


class Flight(Entity[FlightId]):
    """予約済みフライトエンティティ

    属性は呼び出し元が渡したものをそのまま保持する（スキーマレス）。
    挿入後は不変で、所有ユーザーへの逆参照は持たない。
    """

    def __init__(self, id: FlightId, attributes: dict[str, Any]) -> None:
        super().__init__(id)
        self._attributes = dict(attributes)

    @property
    def booked_on(self) -> str | None:
        return self._attributes.get("bookedon")

    def to_dict(self) -> dict[str, Any]:
        return dict(self._attributes)
