from pydantic import Field

from core.domain.status_type import StatusType
from infra.web.routers.schemas import ApiModel
from infra.web.routers.schemas.outage import OutageResponseDTO


class ComponentStatusResponseDTO(ApiModel):
    component_name: str
    status: StatusType
    active_outages: list[OutageResponseDTO] = Field(default_factory=list)
