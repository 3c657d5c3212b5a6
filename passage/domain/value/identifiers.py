"""Strongly typed identifiers for Passage entities."""

from typing import NewType
from uuid import UUID

# Durable user id (primary key of the users table)
UserId = NewType("UserId", UUID)
