from .exceptions import (
    AccountCreationFailedException,
    AuthenticationFailedException,
    BusinessRuleViolationException,
    DataConsistencyException,
    DomainException,
    DuplicateResourceException,
    InvalidFlightPayloadException,
    InvalidPayloadException,
    OptimisticLockException,
    ResourceNotFoundException,
    UserNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "OptimisticLockException",
    "AuthenticationFailedException",
    "AccountCreationFailedException",
    "InvalidPayloadException",
    "InvalidFlightPayloadException",
    "UserNotFoundException",
    "DataConsistencyException",
]
