"""Data models for the queue dashboard.

This package contains Pydantic models for the ticketing API entities:
- BaseDataModel: Base class with common configuration
- Contact / Agent: Conversations in the waiting and active queues
- Attendant: Human attendants and their presence status
- Department: Queue departments
"""

from queue_dashboard.models.attendant import Attendant, AttendantStatus, Department
from queue_dashboard.models.base import BaseDataModel, parse_records
from queue_dashboard.models.contact import (
    Agent,
    Contact,
    ProfilePicture,
    parse_contacts,
)

__all__ = [
    "BaseDataModel",
    "Agent",
    "Attendant",
    "AttendantStatus",
    "Contact",
    "Department",
    "ProfilePicture",
    "parse_contacts",
    "parse_records",
]
