"""Opaque bearer tokens for session keys.

A token carries exactly one tagged key. The tagged key is sealed with
AES-GCM under a key derived from a per-token salt and the server pepper;
the hex salt is prepended and the result is sealed once more under a fixed
application key. The outer layer only hides the salt from casual
inspection; the pepper is what makes tokens unforgeable.
"""

import base64
import os

import logfire
from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.hkdf import HKDF

from passage.domain.error import InvalidTokenError
from passage.domain.value import AccessKey, LoginAccessKey, UserAccessKey

from .base import Service

SALT_BYTES = 16
NONCE_BYTES = 12
_SALT_HEX_LEN = SALT_BYTES * 2

_INNER_INFO = b"passage/access-token/v0"
_OUTER_INFO = b"passage/access-token/outer/v0"

_VARIANTS: tuple[type[LoginAccessKey] | type[UserAccessKey], ...] = (
    LoginAccessKey,
    UserAccessKey,
)


def _b64encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def _b64decode(text: str) -> bytes:
    padded = text + "=" * (-len(text) % 4)
    return base64.b64decode(padded, altchars=b"-_", validate=True)


def _derive(secret: bytes, salt: bytes | None, info: bytes) -> bytes:
    return HKDF(algorithm=hashes.SHA256(), length=32, salt=salt, info=info).derive(
        secret
    )


def _seal(key: bytes, plaintext: bytes) -> bytes:
    nonce = os.urandom(NONCE_BYTES)
    return nonce + AESGCM(key).encrypt(nonce, plaintext, None)


def _open(key: bytes, sealed: bytes) -> bytes:
    if len(sealed) <= NONCE_BYTES:
        raise ValueError("Sealed payload too short")
    return AESGCM(key).decrypt(sealed[:NONCE_BYTES], sealed[NONCE_BYTES:], None)


class AccessTokenCodec(Service):
    """Encodes access keys into bearer tokens and back."""

    def __init__(self, pepper: str, obfuscation_key: str) -> None:
        """Initialize token codec.

        Args:
            pepper: Server secret mixed into every token key
            obfuscation_key: Fixed key of the outer layer
        """
        if not pepper:
            raise ValueError("Token pepper must not be empty")
        self._pepper = pepper.encode("utf-8")
        self._outer_key = _derive(obfuscation_key.encode("utf-8"), None, _OUTER_INFO)

    def encode(self, access_key: AccessKey) -> str:
        """Encode an access key as a fresh, salted bearer token.

        Encoding the same key twice yields different tokens.
        """
        salt = os.urandom(SALT_BYTES)
        tagged = f"{access_key.MARKER}{access_key.key}".encode("utf-8")
        sealed = _seal(_derive(self._pepper, salt, _INNER_INFO), tagged)
        intermediate = salt.hex() + _b64encode(sealed)
        return _b64encode(_seal(self._outer_key, intermediate.encode("ascii")))

    def decode(self, token: str) -> AccessKey:
        """Decode a client-supplied bearer token.

        Args:
            token: Bearer token

        Returns:
            The tagged access key the token carries

        Raises:
            InvalidTokenError: For any malformed, tampered or foreign token
        """
        try:
            return self._decode(token)
        except (ValueError, InvalidTag) as e:
            # binascii, unicode and pydantic validation errors are ValueErrors
            logfire.warn("Access token rejected", reason=type(e).__name__)
            raise InvalidTokenError() from None

    def _decode(self, token: str) -> AccessKey:
        intermediate = _open(self._outer_key, _b64decode(token)).decode("ascii")

        salt = bytes.fromhex(intermediate[:_SALT_HEX_LEN])
        if len(salt) != SALT_BYTES:
            raise ValueError("Salt prefix has the wrong length")

        sealed = _b64decode(intermediate[_SALT_HEX_LEN:])
        tagged = _open(_derive(self._pepper, salt, _INNER_INFO), sealed).decode("utf-8")

        for variant in _VARIANTS:
            if tagged.startswith(variant.MARKER):
                return variant(key=tagged[len(variant.MARKER) :])
        raise ValueError("Unknown access key marker")


def parse_bearer(authorization: str | None) -> str:
    """Extract the token from an ``Authorization: Bearer <token>`` header.

    Raises:
        InvalidTokenError: If the header is missing or not a bearer credential
    """
    if not authorization:
        raise InvalidTokenError()
    scheme, _, token = authorization.partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        raise InvalidTokenError()
    return token
