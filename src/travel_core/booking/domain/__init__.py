from .entity import Flight as Flight
from .factory import FlightFactory as FlightFactory
from .factory import FlightPayload as FlightPayload
from .repository import FlightRepository as FlightRepository
from .value_object import FlightId as FlightId
