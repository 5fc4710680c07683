from .entity import Entity as Entity
from .exception import (
    AccountCreationFailedException as AccountCreationFailedException,
)
from .exception import (
    AuthenticationFailedException as AuthenticationFailedException,
)
from .exception import (
    BusinessRuleViolationException as BusinessRuleViolationException,
)
from .exception import (
    DataConsistencyException as DataConsistencyException,
)
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    DuplicateResourceException as DuplicateResourceException,
)
from .exception import (
    InvalidFlightPayloadException as InvalidFlightPayloadException,
)
from .exception import (
    InvalidPayloadException as InvalidPayloadException,
)
from .exception import (
    OptimisticLockException as OptimisticLockException,
)
from .exception import (
    ResourceNotFoundException as ResourceNotFoundException,
)
from .exception import (
    UserNotFoundException as UserNotFoundException,
)
from .repository import DocumentStore as DocumentStore
from .repository import Repository as Repository
from .value_object import (
    DurabilityLevel as DurabilityLevel,
)
from .value_object import (
    Result as Result,
)
from .value_object import (
    StoredDocument as StoredDocument,
)
