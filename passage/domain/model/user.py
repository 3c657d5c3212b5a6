"""Permanent user record.

Users live in the durable store; the session subsystem only reads them to
snapshot into user sessions and creates them on registration.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from passage.domain.model.common import DomainModel
from passage.domain.value import UserId


class User(DomainModel):
    """Permanent user account."""

    id: UserId
    display_name: str
    full_name: Optional[str] = None
    photo_url: Optional[str] = None
    is_person: bool = True
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class NewUserProfile(DomainModel):
    """Profile fields supplied when registering a user."""

    display_name: str
    full_name: Optional[str] = None
    photo_url: Optional[str] = None
