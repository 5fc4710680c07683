from .flight_id import FlightId as FlightId
