"""Bearer token authentication."""

import logfire

from passage.domain.error import InvalidTokenError, UnauthorizedError
from passage.domain.model import LoginSession, UserSession
from passage.domain.value import LoginAccessKey, UserAccessKey

from .base import Service
from .session_service import SessionService
from .token_codec import AccessTokenCodec


class Authenticator(Service):
    """Turns bearer tokens into sessions and sessions into tokens.

    Decoding is the only trust boundary: a token that decodes carries one
    key of one variant, and the session it names must still exist.
    """

    def __init__(self, codec: AccessTokenCodec, session_service: SessionService) -> None:
        """Initialize authenticator.

        Args:
            codec: Access token codec
            session_service: Session store service
        """
        self.codec = codec
        self.session_service = session_service

    def login_token(self, session: LoginSession) -> str:
        """Issue a Login token for a login session."""
        return self.codec.encode(LoginAccessKey(key=session.key))

    def user_token(self, session: UserSession) -> str:
        """Issue a User token for a user session."""
        return self.codec.encode(UserAccessKey(key=session.key))

    async def login_session(self, token: str) -> LoginSession:
        """Authenticate a Login token.

        Raises:
            UnauthorizedError: If the token is invalid, is a User token, or
                its login session has expired
        """
        with logfire.span("authenticator.login_session"):
            access_key = self.codec.decode(token)
            if not isinstance(access_key, LoginAccessKey):
                logfire.warn("Wrong token kind", expected="login", received="user")
                raise UnauthorizedError("Requires Login token, but received User token")

            session = await self.session_service.get_login_session(access_key.key)
            if session is None:
                raise InvalidTokenError()
            return session

    async def user_session(self, token: str) -> UserSession:
        """Authenticate a User token.

        Raises:
            UnauthorizedError: If the token is invalid, is a Login token, or
                its user session has expired
        """
        with logfire.span("authenticator.user_session"):
            access_key = self.codec.decode(token)
            if not isinstance(access_key, UserAccessKey):
                logfire.warn("Wrong token kind", expected="user", received="login")
                raise UnauthorizedError("Requires User token, but received Login token")

            session = await self.session_service.get_user_session(access_key.key)
            if session is None:
                raise InvalidTokenError()
            return session
