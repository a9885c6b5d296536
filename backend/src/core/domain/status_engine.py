"""Health classification for sub-components and components.

Everything here is pure: callers pass outages that were already fetched (and,
for the classifiers, already filtered to "active" at a single instant) and get
a ``StatusType`` back. Severity values are a closed enum, so nothing in this
module needs to validate them.
"""

from collections.abc import Iterable, Mapping, Sequence
from datetime import datetime
from typing import Optional

from core.domain.outage import Outage
from core.domain.status_type import StatusType


def filter_active(outages: Iterable[Outage], at: datetime) -> list[Outage]:
    return [outage for outage in outages if outage.is_active(at)]


def most_severe_outage(outages: Iterable[Outage]) -> Optional[Outage]:
    """Return one outage at the highest severity level, or None when empty.

    Ties between outages of the same level are not broken by any secondary key;
    whichever maximal outage ``max`` meets first is returned.
    """
    return max(outages, key=lambda outage: outage.severity.level, default=None)


def classify_sub_component(outages: Iterable[Outage]) -> StatusType:
    worst = most_severe_outage(outages)

    if worst is None:
        return StatusType.HEALTHY

    return worst.severity.to_status()


def classify_component(
    sub_component_names: Sequence[str],
    active_outages_by_name: Mapping[str, Iterable[Outage]],
) -> StatusType:
    unique_names = list(dict.fromkeys(sub_component_names))

    if not unique_names:
        return StatusType.HEALTHY

    affected: list[Outage] = []
    affected_count = 0

    for name in unique_names:
        outages = list(active_outages_by_name.get(name, ()))
        if outages:
            affected_count += 1
            affected.extend(outages)

    if affected_count == 0:
        return StatusType.HEALTHY

    if affected_count < len(unique_names):
        return StatusType.PARTIAL

    return classify_sub_component(affected)
