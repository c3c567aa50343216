"""View rotation for the TV board.

The TV board cycles through every waiting-queue page, every active-queue
page, the attendant and department load boards (only while someone is
being served) and any configured external pages.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple

from queue_dashboard.aggregators.pagination import DashboardColumn


class ViewKind(Enum):
    """Kinds of board shown in the rotation."""

    WAITING = "waiting"
    ACTIVE = "active"
    ATTENDANTS = "attendants"
    DEPARTMENTS = "departments"
    EXTERNAL = "external"


@dataclass(frozen=True)
class DashboardView:
    """One step of the rotation."""

    kind: ViewKind
    page_index: int = 0
    columns: Tuple[DashboardColumn, ...] = field(default_factory=tuple)
    url: Optional[str] = None


def parse_external_urls(raw: Optional[str]) -> List[str]:
    """Split a comma-separated URL list, dropping blanks.

    Example:
        >>> parse_external_urls(" https://a.example , ,https://b.example")
        ['https://a.example', 'https://b.example']
    """
    if not raw:
        return []
    return [url.strip() for url in raw.split(",") if url.strip()]


def build_view_rotation(
    waiting_pages: Sequence[Sequence[DashboardColumn]],
    active_pages: Sequence[Sequence[DashboardColumn]],
    has_active_contacts: bool,
    external_urls: Iterable[str] = (),
) -> List[DashboardView]:
    """Flatten the board pages into the TV rotation order."""
    views = [
        DashboardView(ViewKind.WAITING, index, tuple(page))
        for index, page in enumerate(waiting_pages)
    ]
    views.extend(
        DashboardView(ViewKind.ACTIVE, index, tuple(page))
        for index, page in enumerate(active_pages)
    )
    if has_active_contacts:
        views.append(DashboardView(ViewKind.ATTENDANTS))
        views.append(DashboardView(ViewKind.DEPARTMENTS))
    views.extend(
        DashboardView(ViewKind.EXTERNAL, index, url=url)
        for index, url in enumerate(external_urls)
    )
    return views
