"""
Domain exceptions.

Domain exceptions represent business rule violations
and domain-specific error conditions.
"""


class DomainException(Exception):
    """Base exception for all domain exceptions."""

    def __init__(self, message: str, code: str = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__


class NotFoundError(DomainException):
    """Base exception for lookups that found nothing."""

    pass


class AccessDeniedError(DomainException):
    """Base exception for lookups the user may not perform."""

    pass


class ActivationKeyNotFoundError(NotFoundError):
    """Raised when an activation key is not found in the user's organization."""

    def __init__(self, message: str = "Activation key not found"):
        super().__init__(message, code="ACTIVATION_KEY_NOT_FOUND")


class ServerGroupNotFoundError(NotFoundError):
    """Raised when a server group is not found in the user's organization."""

    def __init__(self, message: str = "Server group not found"):
        super().__init__(message, code="SERVER_GROUP_NOT_FOUND")


class ServerGroupAccessDeniedError(AccessDeniedError):
    """Raised when the user may not administer a server group."""

    def __init__(self, message: str = "Access to server group denied"):
        super().__init__(message, code="SERVER_GROUP_ACCESS_DENIED")


class PermissionDeniedError(AccessDeniedError):
    """Raised when the user lacks the role an operation requires."""

    def __init__(self, message: str = "Permission denied"):
        super().__init__(message, code="PERMISSION_DENIED")


class InvalidSelectionError(DomainException):
    """Raised when a selected item id is not a valid identifier."""

    def __init__(self, message: str = "Invalid selection"):
        super().__init__(message, code="INVALID_SELECTION")


class EmptySelectionError(DomainException):
    """Raised when an operation is dispatched without any selected items."""

    def __init__(self, message: str = "No items selected"):
        super().__init__(message, code="EMPTY_SELECTION")


class OrganizationMismatchError(DomainException):
    """Raised when objects of different organizations are combined."""

    def __init__(self, message: str = "Organization mismatch"):
        super().__init__(message, code="ORGANIZATION_MISMATCH")
