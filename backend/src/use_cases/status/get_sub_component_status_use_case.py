from core.domain.component_status import ComponentStatus
from core.domain.component_tree import ComponentTree
from core.domain.status_engine import classify_sub_component, filter_active
from core.port.outage_repository import OutageRepository
from infra.utils.clock import Clock, utc_now


class GetSubComponentStatusUseCase:
    def __init__(
        self,
        component_tree: ComponentTree,
        outage_repository: OutageRepository,
        clock: Clock = utc_now,
    ) -> None:
        self.component_tree = component_tree
        self.outage_repository = outage_repository
        self.clock = clock

    async def execute(self, component_name: str, sub_component_name: str) -> ComponentStatus:
        sub_component = self.component_tree.resolve_sub_component(component_name, sub_component_name)
        evaluated_at = self.clock()

        active_outages = filter_active(
            await self.outage_repository.find_active_by_component_names([sub_component.name], at=evaluated_at),
            evaluated_at,
        )

        return ComponentStatus(
            component_name=sub_component.name,
            status=classify_sub_component(active_outages),
            active_outages=active_outages,
        )
