from dataclasses import replace

import structlog

from core.domain.component_tree import ComponentTree
from core.domain.outage import Outage
from core.domain.severity import Severity
from core.exceptions.outage_not_found_error import OutageNotFoundError
from core.port.outage_repository import OutageRepository
from infra.web.routers.schemas.outage import OutageUpdateDTO

logger = structlog.stdlib.get_logger(__name__)


class UpdateOutageUseCase:
    def __init__(self, component_tree: ComponentTree, outage_repository: OutageRepository) -> None:
        self.component_tree = component_tree
        self.outage_repository = outage_repository

    async def execute(
        self,
        component_name: str,
        sub_component_name: str,
        outage_id: int,
        outage_data: OutageUpdateDTO,
    ) -> Outage:
        sub_component = self.component_tree.resolve_sub_component(component_name, sub_component_name)

        outage = await self.outage_repository.find_by_id(outage_id)

        if outage is None or outage.component_name != sub_component.name:
            raise OutageNotFoundError(outage_id)

        updates = outage_data.updates()

        if "severity" in updates:
            updates["severity"] = Severity(updates["severity"])

        updated_outage = await self.outage_repository.save(replace(outage, **updates))

        logger.info(
            "Successfully updated outage",
            outage_id=outage_id,
            sub_component=sub_component.name,
            updated_fields=sorted(updates),
        )

        return updated_outage
