from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError

from travel_core.booking.domain.entity import Flight
from travel_core.booking.domain.value_object import FlightId
from travel_core.shared.domain import InvalidFlightPayloadException


class FlightPayload(BaseModel):
    """フライトペイロードの入力スキーマ

    必須キーの存在のみ検証し、値の型や追加の属性は問わない。
    """

    model_config = ConfigDict(extra="allow")

    name: Any
    date: Any
    sourceairport: Any
    destinationairport: Any


class FlightFactory:
    """フライトエンティティのファクトリ

    - ペイロードの検証
    - 予約経路を示す bookedon の付与
    - 新しい FlightId の採番
    """

    def __init__(self, booked_on: str) -> None:
        self._booked_on = booked_on

    def create(self, payload: object) -> Flight:
        """新規フライトエンティティを生成する

        Raises:
            InvalidFlightPayloadException: オブジェクトでない、または必須キーが欠けている場合
        """
        if not isinstance(payload, Mapping):
            raise InvalidFlightPayloadException("Each flight must be a non-null object")
        try:
            FlightPayload.model_validate(dict(payload))
        except ValidationError as e:
            raise InvalidFlightPayloadException(
                "Malformed flight inside flights payload"
            ) from e

        # 検証済みモデルではなく元の属性を保持する
        attributes = {**payload, "bookedon": self._booked_on}
        return Flight(id=FlightId.generate(), attributes=attributes)
