from fastapi import APIRouter, Depends, HTTPException, Response, status

from core.domain.component_tree import ComponentTree
from core.domain.outage import Outage
from core.exceptions.component_not_found_error import ComponentNotFoundError
from core.exceptions.outage_not_found_error import OutageNotFoundError
from core.exceptions.sub_component_not_found_error import SubComponentNotFoundError
from core.port.outage_repository import OutageRepository
from infra.web.deps import (
    get_component_tree,
    get_outage_create_payload,
    get_outage_repository,
    get_outage_update_payload,
    resolve_scope,
)
from infra.web.routers.schemas.outage import OutageCreateDTO, OutageResponseDTO, OutageUpdateDTO
from use_cases.outage.create_outage_use_case import CreateOutageUseCase
from use_cases.outage.delete_outage_use_case import DeleteOutageUseCase
from use_cases.outage.get_outage_use_case import GetOutageUseCase
from use_cases.outage.get_outages_use_case import GetOutagesUseCase
from use_cases.outage.update_outage_use_case import UpdateOutageUseCase

router = APIRouter(prefix="/api/components", tags=["Outage"])


def _not_found(error: Exception) -> HTTPException:
    if isinstance(error, ComponentNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")

    if isinstance(error, SubComponentNotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sub-component not found")

    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Outage not found")


@router.get(
    "/{component_name}/outages",
    response_model=list[OutageResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_component_outages(
    component_name: str,
    component_tree: ComponentTree = Depends(get_component_tree),
    outage_repository: OutageRepository = Depends(get_outage_repository),
) -> list[Outage]:
    use_case = GetOutagesUseCase(component_tree, outage_repository)

    try:
        return await use_case.execute(component_name)
    except ComponentNotFoundError as e:
        raise _not_found(e)


@router.get(
    "/{component_name}/{sub_component_name}/outages",
    dependencies=[Depends(resolve_scope)],
    response_model=list[OutageResponseDTO],
    status_code=status.HTTP_200_OK,
)
async def get_sub_component_outages(
    component_name: str,
    sub_component_name: str,
    component_tree: ComponentTree = Depends(get_component_tree),
    outage_repository: OutageRepository = Depends(get_outage_repository),
) -> list[Outage]:
    use_case = GetOutagesUseCase(component_tree, outage_repository)

    try:
        return await use_case.execute(component_name, sub_component_name)
    except (ComponentNotFoundError, SubComponentNotFoundError) as e:
        raise _not_found(e)


@router.post(
    "/{component_name}/{sub_component_name}/outages",
    dependencies=[Depends(resolve_scope)],
    response_model=OutageResponseDTO,
    status_code=status.HTTP_201_CREATED,
)
async def create_outage(
    component_name: str,
    sub_component_name: str,
    payload: OutageCreateDTO = Depends(get_outage_create_payload),
    component_tree: ComponentTree = Depends(get_component_tree),
    outage_repository: OutageRepository = Depends(get_outage_repository),
) -> Outage:
    use_case = CreateOutageUseCase(component_tree, outage_repository)

    try:
        return await use_case.execute(component_name, sub_component_name, payload)
    except (ComponentNotFoundError, SubComponentNotFoundError) as e:
        raise _not_found(e)


@router.get(
    "/{component_name}/{sub_component_name}/outages/{outage_id}",
    dependencies=[Depends(resolve_scope)],
    response_model=OutageResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def get_outage(
    component_name: str,
    sub_component_name: str,
    outage_id: int,
    component_tree: ComponentTree = Depends(get_component_tree),
    outage_repository: OutageRepository = Depends(get_outage_repository),
) -> Outage:
    use_case = GetOutageUseCase(component_tree, outage_repository)

    try:
        return await use_case.execute(component_name, sub_component_name, outage_id)
    except (ComponentNotFoundError, SubComponentNotFoundError, OutageNotFoundError) as e:
        raise _not_found(e)


@router.patch(
    "/{component_name}/{sub_component_name}/outages/{outage_id}",
    dependencies=[Depends(resolve_scope)],
    response_model=OutageResponseDTO,
    status_code=status.HTTP_200_OK,
)
async def update_outage(
    component_name: str,
    sub_component_name: str,
    outage_id: int,
    payload: OutageUpdateDTO = Depends(get_outage_update_payload),
    component_tree: ComponentTree = Depends(get_component_tree),
    outage_repository: OutageRepository = Depends(get_outage_repository),
) -> Outage:
    use_case = UpdateOutageUseCase(component_tree, outage_repository)

    try:
        return await use_case.execute(component_name, sub_component_name, outage_id, payload)
    except (ComponentNotFoundError, SubComponentNotFoundError, OutageNotFoundError) as e:
        raise _not_found(e)


@router.delete(
    "/{component_name}/{sub_component_name}/outages/{outage_id}",
    dependencies=[Depends(resolve_scope)],
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_outage(
    component_name: str,
    sub_component_name: str,
    outage_id: int,
    component_tree: ComponentTree = Depends(get_component_tree),
    outage_repository: OutageRepository = Depends(get_outage_repository),
) -> Response:
    use_case = DeleteOutageUseCase(component_tree, outage_repository)

    try:
        await use_case.execute(component_name, sub_component_name, outage_id)
    except (ComponentNotFoundError, SubComponentNotFoundError, OutageNotFoundError) as e:
        raise _not_found(e)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
