"""Attendant and department models for the queue dashboard."""

from enum import IntEnum
from typing import Any, Optional

from pydantic import AliasChoices, Field, field_validator

from queue_dashboard.models.base import BaseDataModel
from queue_dashboard.models.contact import ProfilePicture


class AttendantStatus(IntEnum):
    """Presence status reported for an attendant."""

    OFFLINE = 0
    ONLINE = 1
    BUSY = 2


class Attendant(BaseDataModel):
    """Represents a human attendant of the contact center.

    Attributes:
        id: Attendant identifier (matches ``Agent.platform_user_id``)
        name: Display name (may be missing on incomplete registrations)
        email: Login email
        status: Raw status code (0 offline, 1 online, 2 busy)
    """

    id: str = ""
    name: Optional[str] = None
    email: Optional[str] = None
    status: int = 0
    profile_picture: Optional[ProfilePicture] = Field(None, alias="profilePicture")

    @field_validator("id", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("status", mode="before")
    @classmethod
    def default_status(cls, v: Any) -> Any:
        return 0 if v is None else v

    @property
    def presence(self) -> AttendantStatus:
        """Status as an enum; unknown codes count as offline."""
        try:
            return AttendantStatus(self.status)
        except ValueError:
            return AttendantStatus.OFFLINE


class Department(BaseDataModel):
    """Department (queue) as listed by the API.

    The API has returned the display name both as ``Name`` and ``name``.
    """

    id: str = ""
    name: Optional[str] = Field(
        None, validation_alias=AliasChoices("Name", "name")
    )

    @field_validator("id", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v
