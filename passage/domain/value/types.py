"""Domain value objects for Passage.

Value objects are immutable and defined by their values, not identity.
"""

import re
from datetime import datetime
from enum import Enum
from typing import Annotated, ClassVar, Literal, Union

from pydantic import Field, field_validator

from passage.domain.value.common import ValueObject

_HEX_KEY = re.compile(r"[0-9a-f]{24,}")

# Short provider tags used in the stored external id
_PROVIDER_TAGS = {"google": "goog"}


class AuthProvider(str, Enum):
    """Supported identity providers."""

    GOOGLE = "google"


class SessionState(str, Enum):
    """Progress of a login session through the OAuth hand-off."""

    ANONYMOUS = "anonymous"
    IDENTITY_KNOWN = "identity_known"
    USER_LINKED = "user_linked"


class IAm(ValueObject):
    """Identity snapshot returned by a provider's "who am I" endpoint.

    Field aliases keep the JSON stored in the ephemeral store compact.
    """

    provider: AuthProvider = Field(alias="p")
    resource_name: str = Field(alias="r")  # Provider's permanent id for the person
    email: str | None = Field(default=None, alias="e")
    given_name: str | None = Field(default=None, alias="g")
    full_name: str | None = Field(default=None, alias="f")
    photo_url: str | None = Field(default=None, alias="ph")


class ExternalIdentity(ValueObject):
    """Provider identity as stored in the durable user store."""

    provider: AuthProvider
    resource_name: str

    @classmethod
    def from_i_am(cls, i_am: IAm) -> "ExternalIdentity":
        """Build the durable identity for a provider snapshot."""
        return cls(provider=i_am.provider, resource_name=i_am.resource_name)

    def __str__(self) -> str:
        """Stored form, e.g. ``goog|people/1234``."""
        return f"{_PROVIDER_TAGS[self.provider.value]}|{self.resource_name}"


class ExchangeResult(ValueObject):
    """Outcome of exchanging an authorization code with a provider.

    Providers only return a refresh token on the first consent; later
    exchanges carry the access token alone.
    """

    access_token: str
    expires_at: datetime
    refresh_token: str | None = None

    @property
    def is_refreshable(self) -> bool:
        return self.refresh_token is not None


class _AccessKeyBase(ValueObject):
    key: str

    @field_validator("key")
    @classmethod
    def validate_key_format(cls, v: str) -> str:
        """Keys are lowercase hex with at least 96 bits of entropy."""
        if not _HEX_KEY.fullmatch(v):
            raise ValueError("Access key must be lowercase hex, at least 24 characters")
        return v


class LoginAccessKey(_AccessKeyBase):
    """Key of an anonymous login session."""

    MARKER: ClassVar[str] = "Login "

    kind: Literal["login"] = "login"


class UserAccessKey(_AccessKeyBase):
    """Key of an identified user session."""

    MARKER: ClassVar[str] = "User "

    kind: Literal["user"] = "user"


AccessKey = Annotated[
    Union[LoginAccessKey, UserAccessKey], Field(discriminator="kind")
]
