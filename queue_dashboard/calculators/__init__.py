"""Calculator modules for the queue dashboard."""

from queue_dashboard.calculators.business_time import (
    BusinessHours,
    BusinessTimeCalculator,
    business_minutes,
)
from queue_dashboard.calculators.duration_formatter import (
    DurationFormatter,
    format_duration_minutes,
)
from queue_dashboard.calculators.sla import SlaEvaluator, SlaStatus, evaluate_minutes
from queue_dashboard.calculators.time_utils import (
    InvalidTimestampError,
    get_zone,
    parse_instant,
    seconds_to_minutes,
    timedelta_to_minutes,
)

__all__ = [
    # business_time
    "BusinessHours",
    "BusinessTimeCalculator",
    "business_minutes",
    # duration_formatter
    "DurationFormatter",
    "format_duration_minutes",
    # sla
    "SlaEvaluator",
    "SlaStatus",
    "evaluate_minutes",
    # time_utils
    "InvalidTimestampError",
    "get_zone",
    "parse_instant",
    "seconds_to_minutes",
    "timedelta_to_minutes",
]
