"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class AuthenticationError(DomainError):
    """Raised when no viewer can be resolved for a request."""

    pass


class AuthorizationError(DomainError):
    """Base error for denied actions."""

    pass


class PermissionDeniedError(AuthorizationError):
    """Raised when the permission gate denies an action."""

    def __init__(self, permission: str, viewer: str):
        self.permission = permission
        self.viewer = viewer
        super().__init__(f"Viewer {viewer} is not allowed to perform {permission}")


class NotAuthorizedError(AuthorizationError):
    """Raised when a viewer attempts to edit content they don't own."""

    def __init__(self, resource: str, resource_id: int | str, viewer: str):
        super().__init__(
            f"Viewer {viewer} is not authorized to edit {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: int | str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when a concurrent mutation is detected.

    Not raised by any operation yet.
    """

    pass
