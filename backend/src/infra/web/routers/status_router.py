from fastapi import APIRouter, Depends, HTTPException, status

from core.domain.component_status import ComponentStatus
from core.domain.component_tree import ComponentTree
from core.exceptions.component_not_found_error import ComponentNotFoundError
from core.exceptions.sub_component_not_found_error import SubComponentNotFoundError
from core.port.outage_repository import OutageRepository
from infra.utils.clock import Clock
from infra.web.deps import get_clock, get_component_tree, get_outage_repository
from infra.web.routers.schemas.status import ComponentStatusResponseDTO
from use_cases.status.get_all_component_statuses_use_case import GetAllComponentStatusesUseCase
from use_cases.status.get_component_status_use_case import GetComponentStatusUseCase
from use_cases.status.get_sub_component_status_use_case import GetSubComponentStatusUseCase

router = APIRouter(prefix="/api/status", tags=["Status"])


@router.get(
    "",
    response_model=list[ComponentStatusResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_all_component_statuses(
    component_tree: ComponentTree = Depends(get_component_tree),
    outage_repository: OutageRepository = Depends(get_outage_repository),
    clock: Clock = Depends(get_clock),
) -> list[ComponentStatus]:
    use_case = GetAllComponentStatusesUseCase(component_tree, outage_repository, clock)
    return await use_case.execute()


@router.get(
    "/{component_name}",
    response_model=ComponentStatusResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_component_status(
    component_name: str,
    component_tree: ComponentTree = Depends(get_component_tree),
    outage_repository: OutageRepository = Depends(get_outage_repository),
    clock: Clock = Depends(get_clock),
) -> ComponentStatus:
    use_case = GetComponentStatusUseCase(component_tree, outage_repository, clock)

    try:
        return await use_case.execute(component_name)
    except ComponentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")


@router.get(
    "/{component_name}/{sub_component_name}",
    response_model=ComponentStatusResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_sub_component_status(
    component_name: str,
    sub_component_name: str,
    component_tree: ComponentTree = Depends(get_component_tree),
    outage_repository: OutageRepository = Depends(get_outage_repository),
    clock: Clock = Depends(get_clock),
) -> ComponentStatus:
    use_case = GetSubComponentStatusUseCase(component_tree, outage_repository, clock)

    try:
        return await use_case.execute(component_name, sub_component_name)
    except ComponentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")
    except SubComponentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sub-component not found")
