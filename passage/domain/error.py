"""Domain layer errors.

Each error carries the category the HTTP layer maps to a status code:
bad request, unauthorized, not found, conflict, or internal.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class BadRequestError(DomainError):
    """The request is malformed or arrives out of order in the login flow."""

    pass


class UnauthorizedError(DomainError):
    """Credentials are missing, invalid, or lack the required linkage."""

    pass


class InvalidTokenError(UnauthorizedError):
    """An access token failed to decode.

    The message is always the same so callers cannot tell which layer of
    the token rejected it.
    """

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class SessionExpiredError(UnauthorizedError):
    """The login session behind a request no longer exists."""

    def __init__(self, message: str = "Login session expired, restart login") -> None:
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested durable resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """The request conflicts with existing durable state."""

    pass


class AlreadyRegisteredError(ConflictError):
    """A user is already registered for this external identity."""

    def __init__(self, external_id: str):
        self.external_id = external_id
        super().__init__("User associated to that login method already exists")


class InternalError(DomainError):
    """Unexpected failure; the message is never shown to clients."""

    pass


class StoreUnavailableError(InternalError):
    """The ephemeral store could not be reached or returned corrupt data."""

    pass


class KeyGenerationExhaustedError(InternalError):
    """Every attempt to reserve a fresh random key collided."""

    def __init__(self, prefix: str, attempts: int):
        self.prefix = prefix
        self.attempts = attempts
        super().__init__(f"Ran out of attempts creating a {prefix} key ({attempts})")
