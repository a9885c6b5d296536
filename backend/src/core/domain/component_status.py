from dataclasses import dataclass, field

from core.domain.outage import Outage
from core.domain.status_type import StatusType


@dataclass
class ComponentStatus:
    component_name: str
    status: StatusType
    active_outages: list[Outage] = field(default_factory=list)
