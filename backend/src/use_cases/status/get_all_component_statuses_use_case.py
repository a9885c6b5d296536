from core.domain.component_status import ComponentStatus
from core.domain.component_tree import ComponentTree
from core.domain.status_engine import filter_active
from core.port.outage_repository import OutageRepository
from infra.utils.clock import Clock, utc_now
from use_cases.status.get_component_status_use_case import build_component_status, group_by_component_name


class GetAllComponentStatusesUseCase:
    def __init__(
        self,
        component_tree: ComponentTree,
        outage_repository: OutageRepository,
        clock: Clock = utc_now,
    ) -> None:
        self.component_tree = component_tree
        self.outage_repository = outage_repository
        self.clock = clock

    async def execute(self) -> list[ComponentStatus]:
        evaluated_at = self.clock()

        # One query for the whole tree so every component is judged at the same instant.
        active_outages = await self.outage_repository.find_active_by_component_names(
            self.component_tree.all_sub_component_names(),
            at=evaluated_at,
        )
        active_outages_by_name = group_by_component_name(filter_active(active_outages, evaluated_at))

        return [
            build_component_status(component, active_outages_by_name)
            for component in self.component_tree.components
        ]
