from typing import Optional

from core.domain.component_tree import ComponentTree
from core.domain.outage import Outage
from core.port.outage_repository import OutageRepository


class GetOutagesUseCase:
    """Outage history for a sub-component, or for every sub-component of a component."""

    def __init__(self, component_tree: ComponentTree, outage_repository: OutageRepository) -> None:
        self.component_tree = component_tree
        self.outage_repository = outage_repository

    async def execute(self, component_name: str, sub_component_name: Optional[str] = None) -> list[Outage]:
        if sub_component_name is None:
            component_names = self.component_tree.get_component(component_name).sub_component_names()
        else:
            sub_component = self.component_tree.resolve_sub_component(component_name, sub_component_name)
            component_names = [sub_component.name]

        if not component_names:
            return []

        return await self.outage_repository.find_by_component_names(component_names)
