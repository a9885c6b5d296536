from collections import defaultdict
from datetime import datetime

from core.domain.component import Component
from core.domain.component_status import ComponentStatus
from core.domain.component_tree import ComponentTree
from core.domain.outage import Outage
from core.domain.status_engine import classify_component, filter_active
from core.port.outage_repository import OutageRepository
from infra.utils.clock import Clock, utc_now


def group_by_component_name(outages: list[Outage]) -> dict[str, list[Outage]]:
    grouped: dict[str, list[Outage]] = defaultdict(list)

    for outage in outages:
        grouped[outage.component_name].append(outage)

    return grouped


def build_component_status(component: Component, active_outages_by_name: dict[str, list[Outage]]) -> ComponentStatus:
    sub_component_names = component.sub_component_names()
    active_outages = [
        outage
        for name in sub_component_names
        for outage in active_outages_by_name.get(name, [])
    ]
    active_outages.sort(key=lambda outage: outage.start_time, reverse=True)

    return ComponentStatus(
        component_name=component.name,
        status=classify_component(sub_component_names, active_outages_by_name),
        active_outages=active_outages,
    )


class GetComponentStatusUseCase:
    """Roll the active outages of every sub-component up into one component status."""

    def __init__(
        self,
        component_tree: ComponentTree,
        outage_repository: OutageRepository,
        clock: Clock = utc_now,
    ) -> None:
        self.component_tree = component_tree
        self.outage_repository = outage_repository
        self.clock = clock

    async def execute(self, component_name: str) -> ComponentStatus:
        component = self.component_tree.get_component(component_name)
        evaluated_at: datetime = self.clock()

        active_outages = await self.outage_repository.find_active_by_component_names(
            component.sub_component_names(),
            at=evaluated_at,
        )

        active_outages_by_name = group_by_component_name(filter_active(active_outages, evaluated_at))

        return build_component_status(component, active_outages_by_name)
