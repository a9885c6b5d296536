from dataclasses import dataclass, field
from typing import Optional

from core.domain.owner import Owner
from core.domain.sub_component import SubComponent


@dataclass(frozen=True)
class Component:
    name: str
    description: str = ""
    ship_team: str = ""
    slack_channel: str = ""

    sub_components: tuple[SubComponent, ...] = field(default_factory=tuple)
    owners: tuple[Owner, ...] = field(default_factory=tuple)

    def get_sub_component(self, sub_component_name: str) -> Optional[SubComponent]:
        for sub_component in self.sub_components:
            if sub_component.name == sub_component_name:
                return sub_component

        return None

    def sub_component_names(self) -> list[str]:
        return [sub_component.name for sub_component in self.sub_components]
