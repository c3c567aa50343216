"""Contact data models for the queue dashboard.

This module defines the Contact model (a conversation waiting in or being
served by a queue) and its Agent sub-record, as returned by the Suri
ticketing API.
"""

import datetime as dt
from typing import Any, Dict, Iterable, List, Optional

from pydantic import Field, field_validator

from queue_dashboard.models.base import BaseDataModel, parse_records


class ProfilePicture(BaseDataModel):
    """Profile picture reference attached to contacts and attendants."""

    name: Optional[str] = None
    url: Optional[str] = None


class Agent(BaseDataModel):
    """Agent assignment of a contact.

    Attributes:
        status: Raw agent status code from the API
        department_id: Department of the assigned agent
        date_request: When the contact entered the human queue
        date_answer: When an attendant started serving the contact
        platform_user_id: Attendant id of the assigned agent
    """

    status: Optional[int] = None
    department_id: Optional[str] = Field(None, alias="departmentId")
    date_request: Optional[dt.datetime] = Field(None, alias="dateRequest")
    date_answer: Optional[dt.datetime] = Field(None, alias="dateAnswer")
    platform_user_id: Optional[str] = Field(None, alias="platformUserId")

    @field_validator("date_request", "date_answer", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty timestamp strings as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v


class Contact(BaseDataModel):
    """Represents a conversation in the waiting or active queue.

    Attributes:
        id: Opaque unique identifier
        name: Customer display name
        phone: Customer phone number
        email: Customer email, if known
        last_activity: Fallback start of the contact's current phase
        date_create: When the contact was created
        department_id: Queue the contact is waiting in
        default_department_id: Channel default department
        agent: Assigned agent details, if any

    Example:
        >>> contact = Contact.model_validate({
        ...     "id": "c-1",
        ...     "name": "Maria",
        ...     "lastActivity": "2024-03-04T09:30:00Z",
        ...     "departmentId": "cb123",
        ... })
        >>> contact.department_id
        'cb123'
    """

    id: str = Field(..., min_length=1)
    name: str = ""
    phone: str = ""
    email: Optional[str] = None
    profile_picture: Optional[ProfilePicture] = Field(None, alias="profilePicture")
    date_create: Optional[dt.datetime] = Field(None, alias="dateCreate")
    last_activity: dt.datetime = Field(..., alias="lastActivity")
    channel_id: Optional[str] = Field(None, alias="channelId")
    channel_type: Optional[int] = Field(None, alias="channelType")
    department_id: Optional[str] = Field(None, alias="departmentId")
    default_department_id: Optional[str] = Field(None, alias="defaultDepartmentId")
    agent: Optional[Agent] = None
    variables: Optional[Dict[str, Optional[str]]] = None

    @field_validator("name", "phone", mode="before")
    @classmethod
    def none_to_empty(cls, v: Any) -> Any:
        """The API sends null for unknown names and phones."""
        return "" if v is None else v

    @field_validator("date_create", mode="before")
    @classmethod
    def blank_to_none(cls, v: Any) -> Any:
        """Treat empty timestamp strings as missing."""
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def attendance_started_at(self) -> dt.datetime:
        """When the current attendance began (answer time, else last activity)."""
        if self.agent is not None and self.agent.date_answer is not None:
            return self.agent.date_answer
        return self.last_activity

    @property
    def attendant_id(self) -> Optional[str]:
        """Attendant serving this contact, if any."""
        if self.agent is None:
            return None
        return self.agent.platform_user_id or None


def parse_contacts(items: Iterable[Dict[str, Any]]) -> List[Contact]:
    """Build Contact models from raw API records.

    Records that fail validation (missing id, unparseable timestamps) are
    skipped with a warning so one bad record never blanks the dashboard.

    Args:
        items: Raw contact dictionaries from the API

    Returns:
        List of validated contacts in input order
    """
    return parse_records(Contact, items)
