"""Base model for all data models in the queue dashboard.

This module provides a base Pydantic model with common configuration
shared by the ticketing API entities and the business-hours settings,
plus a helper that validates raw API records in bulk.
"""

import logging
from typing import Any, Dict, Iterable, List, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound="BaseDataModel")


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides common configuration for:
    - Validation with type checking
    - Population by field name or by the API's camelCase alias
    - Ignoring API fields the dashboard does not use

    Example:
        >>> class Queue(BaseDataModel):
        ...     name: str
        ...     size: int
        >>> queue = Queue(name="Sales", size=3)
        >>> queue.model_dump()
        {'name': 'Sales', 'size': 3}
    """

    model_config = ConfigDict(
        # Allow arbitrary types like ZoneInfo, datetime
        arbitrary_types_allowed=True,
        # Validate on assignment to catch errors early
        validate_assignment=True,
        strict=False,
        # The API adds fields over time; unknown ones are dropped
        extra="ignore",
        # Accept both `last_activity` and `lastActivity`
        populate_by_name=True,
        frozen=False,
    )


def parse_records(model: Type[ModelT], items: Iterable[Dict[str, Any]]) -> List[ModelT]:
    """Validate raw API records, skipping invalid ones with a warning.

    One malformed record (missing id, unparseable timestamp) must never
    blank the whole dashboard, so failures are logged and dropped.

    Args:
        model: Model class to validate against
        items: Raw dictionaries from the API

    Returns:
        List of validated models in input order

    Example:
        >>> parse_records(Department, [{"id": "cb1", "Name": "Sales"}, None])
        [Department(id='cb1', name='Sales')]
    """
    records: List[ModelT] = []
    for item in items:
        try:
            records.append(model.model_validate(item))
        except ValidationError as e:
            record_id = item.get("id") if isinstance(item, dict) else None
            logger.warning(
                f"Skipping invalid {model.__name__} record {record_id!r}: "
                f"{e.error_count()} validation error(s)"
            )
    return records
