"""Identity resolution domain service."""

import logfire

from qeta.config import AuthSettings
from qeta.domain.error import AuthenticationError
from qeta.domain.value import ViewerId
from qeta.util.jwt import JWTError, verify_token


class IdentityService:
    """Maps request credentials to a viewer."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize identity service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def resolve_viewer(self, credentials: str | None) -> ViewerId:
        """Resolve the viewer a request executes for.

        Args:
            credentials: JWT token from the request, if any

        Returns:
            The token subject, or the anonymous viewer when no credentials
            were sent and anonymous access is enabled

        Raises:
            AuthenticationError: If credentials are missing and anonymous
                access is disabled, or if the token is invalid
        """
        if not credentials:
            if self.auth_settings.allow_anonymous:
                return ViewerId(self.auth_settings.anonymous_viewer)
            logfire.warn("Request without credentials rejected")
            raise AuthenticationError("Missing token in 'authorization' header")

        try:
            payload = verify_token(credentials, self.auth_settings)
        except JWTError as e:
            logfire.warn("Token verification failed", error=str(e))
            raise AuthenticationError(str(e))

        return ViewerId(payload.sub)
