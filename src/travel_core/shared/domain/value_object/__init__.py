from .durability_level import DurabilityLevel as DurabilityLevel
from .result import Result as Result
from .stored_document import StoredDocument as StoredDocument
