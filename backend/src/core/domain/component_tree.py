from dataclasses import dataclass, field
from typing import Optional

from core.domain.component import Component
from core.domain.sub_component import SubComponent
from core.exceptions.component_not_found_error import ComponentNotFoundError
from core.exceptions.sub_component_not_found_error import SubComponentNotFoundError


@dataclass(frozen=True)
class ComponentTree:
    """Static component topology, loaded once at startup and only read afterwards."""

    components: tuple[Component, ...] = field(default_factory=tuple)

    def find_component(self, component_name: str) -> Optional[Component]:
        for component in self.components:
            if component.name == component_name:
                return component

        return None

    def get_component(self, component_name: str) -> Component:
        component = self.find_component(component_name)

        if component is None:
            raise ComponentNotFoundError(component_name)

        return component

    def resolve_sub_component(self, component_name: str, sub_component_name: str) -> SubComponent:
        component = self.get_component(component_name)
        sub_component = component.get_sub_component(sub_component_name)

        if sub_component is None:
            raise SubComponentNotFoundError(component_name, sub_component_name)

        return sub_component

    def all_sub_component_names(self) -> list[str]:
        return [name for component in self.components for name in component.sub_component_names()]
