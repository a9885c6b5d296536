import structlog

from core.domain.component_tree import ComponentTree
from core.domain.outage import Outage
from core.domain.severity import Severity
from core.port.outage_repository import OutageRepository
from infra.web.routers.schemas.outage import OutageCreateDTO

logger = structlog.stdlib.get_logger(__name__)


class CreateOutageUseCase:
    def __init__(self, component_tree: ComponentTree, outage_repository: OutageRepository) -> None:
        self.component_tree = component_tree
        self.outage_repository = outage_repository

    async def execute(self, component_name: str, sub_component_name: str, outage: OutageCreateDTO) -> Outage:
        sub_component = self.component_tree.resolve_sub_component(component_name, sub_component_name)

        outage_entity = Outage(
            id=None,
            component_name=sub_component.name,
            severity=Severity(outage.severity),
            start_time=outage.start_time,
            end_time=outage.end_time,
            auto_resolve=outage.auto_resolve,
            description=outage.description,
            discovered_from=outage.discovered_from,
            created_by=outage.created_by,
        )

        created = await self.outage_repository.save(outage_entity)

        logger.info(
            "Successfully created outage",
            outage_id=created.id,
            component=component_name,
            sub_component=sub_component.name,
            severity=created.severity.value,
            created_by=created.created_by,
        )

        return created
