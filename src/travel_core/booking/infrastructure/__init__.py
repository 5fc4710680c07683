from .document_flight_repository import (
    DocumentFlightRepository as DocumentFlightRepository,
)
