from typing import Optional

from pydantic import Field

from infra.web.routers.schemas import ApiModel


class OwnerResponseDTO(ApiModel):
    rover_group: Optional[str] = None
    service_account: Optional[str] = None


class SubComponentResponseDTO(ApiModel):
    name: str
    description: str
    managed: bool
    requires_confirmation: bool


class ComponentResponseDTO(ApiModel):
    name: str
    description: str
    ship_team: str
    slack_channel: str
    sub_components: list[SubComponentResponseDTO] = Field(default_factory=list)
    owners: list[OwnerResponseDTO] = Field(default_factory=list)
