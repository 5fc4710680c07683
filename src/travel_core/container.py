import os
from dataclasses import dataclass

from travel_core.account.applications import CreateLoginService, LoginService
from travel_core.account.domain.capability import PasswordHasher, TokenIssuer
from travel_core.account.infrastructure import (
    DocumentUserRepository,
    HmacTokenIssuer,
    Pbkdf2PasswordHasher,
)
from travel_core.booking.applications import GetFlightsService, RegisterFlightService
from travel_core.booking.domain.factory import FlightFactory
from travel_core.booking.infrastructure import DocumentFlightRepository
from travel_core.shared.domain import DocumentStore, DurabilityLevel, Result
from travel_core.shared.infrastructure import DynamoDBDocumentStore

DEFAULT_BOOKED_ON = "travel-core-python"


@dataclass(frozen=True)
class TravelCore:
    """外側のリクエスト層に公開するオペレーションの窓口"""

    login_service: LoginService
    create_login_service: CreateLoginService
    register_flight_service: RegisterFlightService
    get_flights_service: GetFlightsService

    def login(self, username: str, password: str) -> dict:
        return self.login_service.login(username, password)

    def create_login(
        self,
        username: str,
        password: str,
        durability: DurabilityLevel = DurabilityLevel.NONE,
    ) -> Result:
        return self.create_login_service.create_login(username, password, durability)

    def register_flight_for_user(self, username: str, new_flights: object) -> Result:
        return self.register_flight_service.register_flight_for_user(
            username, new_flights
        )

    def get_flights_for_user(self, username: str) -> list[dict]:
        return self.get_flights_service.get_flights_for_user(username)


def create_travel_core(
    store: DocumentStore | None = None,
    hasher: PasswordHasher | None = None,
    token_issuer: TokenIssuer | None = None,
    booked_on: str | None = None,
    max_conflict_retries: int | None = None,
) -> TravelCore:
    """依存関係を組み立てる（未指定のものは環境変数からデフォルト実装を生成）"""
    store = store or DynamoDBDocumentStore()
    hasher = hasher or Pbkdf2PasswordHasher()
    token_issuer = token_issuer or HmacTokenIssuer()
    booked_on = booked_on or os.getenv("BOOKED_ON", DEFAULT_BOOKED_ON)

    user_repository = DocumentUserRepository(store)
    flight_repository = DocumentFlightRepository(store)

    return TravelCore(
        login_service=LoginService(user_repository, hasher, token_issuer),
        create_login_service=CreateLoginService(user_repository, hasher, token_issuer),
        register_flight_service=RegisterFlightService(
            user_repository,
            flight_repository,
            FlightFactory(booked_on),
            max_conflict_retries=max_conflict_retries,
        ),
        get_flights_service=GetFlightsService(user_repository, flight_repository),
    )
