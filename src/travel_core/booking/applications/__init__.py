from .get_flights import GetFlightsService as GetFlightsService
from .register_flight import RegisterFlightService as RegisterFlightService
