from core.domain.component_tree import ComponentTree
from core.domain.outage import Outage
from core.exceptions.outage_not_found_error import OutageNotFoundError
from core.port.outage_repository import OutageRepository


class GetOutageUseCase:
    def __init__(self, component_tree: ComponentTree, outage_repository: OutageRepository) -> None:
        self.component_tree = component_tree
        self.outage_repository = outage_repository

    async def execute(self, component_name: str, sub_component_name: str, outage_id: int) -> Outage:
        sub_component = self.component_tree.resolve_sub_component(component_name, sub_component_name)

        outage = await self.outage_repository.find_by_id(outage_id)

        if outage is None or outage.component_name != sub_component.name:
            raise OutageNotFoundError(outage_id)

        return outage
