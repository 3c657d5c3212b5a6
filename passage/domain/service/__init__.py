"""Domain services for Passage."""

from passage.domain.service.auth_service import AuthService, IdentityProviderClient
from passage.domain.service.authenticator import Authenticator
from passage.domain.service.base import Service
from passage.domain.service.key_generator import KeyGenerator, secure_rand_hex
from passage.domain.service.record_store import RecordStore
from passage.domain.service.session_service import SessionService
from passage.domain.service.token_codec import AccessTokenCodec, parse_bearer
from passage.domain.service.user_service import UserService

__all__ = [
    "AccessTokenCodec",
    "AuthService",
    "Authenticator",
    "IdentityProviderClient",
    "KeyGenerator",
    "RecordStore",
    "Service",
    "SessionService",
    "UserService",
    "parse_bearer",
    "secure_rand_hex",
]
