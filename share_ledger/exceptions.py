"""Custom exception hierarchy for share-ledger."""


class LedgerError(Exception):
    """Base exception for all share-ledger errors."""


class AlreadyInitializedError(LedgerError):
    """Raised when the ledger is initialized a second time."""


class NotInitializedError(LedgerError):
    """Raised when an operation needs an initialized ledger."""


class EntityNotFoundError(LedgerError):
    """Raised when a referenced entity does not exist."""


class PropertyNotFoundError(EntityNotFoundError):
    """Raised when a property id is unknown."""

    def __init__(self, property_id: int) -> None:
        super().__init__(f"Property {property_id} not found")
        self.property_id = property_id


class NoBalanceError(EntityNotFoundError):
    """Raised when an owner holds no ownership record for a property."""

    def __init__(self, property_id: int, owner: str) -> None:
        super().__init__(f"{owner} holds no shares of property {property_id}")
        self.property_id = property_id
        self.owner = owner


class InvalidEntityStateError(LedgerError):
    """Raised when an entity is in an invalid state for the operation."""


class AlreadyVerifiedError(InvalidEntityStateError):
    """Raised when verifying a property that is already verified."""

    def __init__(self, property_id: int) -> None:
        super().__init__(f"Property {property_id} already verified")
        self.property_id = property_id


class NotVerifiedError(InvalidEntityStateError):
    """Raised when trading shares of an unverified property."""

    def __init__(self, property_id: int) -> None:
        super().__init__(f"Property {property_id} is not verified")
        self.property_id = property_id


class NotAuthorizedError(LedgerError):
    """Raised when a caller has not proven control of an identity."""

    def __init__(self, identity: str) -> None:
        super().__init__(f"Identity {identity} is not authorized")
        self.identity = identity


class InsufficientSharesError(LedgerError):
    """Raised when a sender holds fewer shares than requested."""

    def __init__(self, property_id: int, owner: str, held: int, requested: int) -> None:
        super().__init__(
            f"{owner} holds {held} shares of property {property_id}, {requested} requested"
        )
        self.property_id = property_id
        self.owner = owner
        self.held = held
        self.requested = requested


class ExceedsSupplyError(LedgerError):
    """Raised when a purchase would sell more shares than a property has."""

    def __init__(self, property_id: int, available: int, requested: int) -> None:
        super().__init__(
            f"Property {property_id} has {available} shares available, {requested} requested"
        )
        self.property_id = property_id
        self.available = available
        self.requested = requested


class InvalidOperationError(LedgerError):
    """Raised when operation arguments are invalid."""


class InvalidShareAmountError(InvalidOperationError):
    """Raised when a share amount is not a positive integer."""


class SelfTransferError(InvalidOperationError):
    """Raised when sender and recipient of a transfer are the same identity."""


class ConfigurationError(LedgerError):
    """Raised when configuration is invalid or missing."""


class StorageError(LedgerError):
    """Raised when the backing store fails or holds malformed data."""


class SinkError(LedgerError):
    """Raised when a sink operation fails."""
