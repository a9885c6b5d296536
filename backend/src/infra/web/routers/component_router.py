from fastapi import APIRouter, Depends, HTTPException, status

from core.domain.component import Component
from core.domain.component_tree import ComponentTree
from core.exceptions.component_not_found_error import ComponentNotFoundError
from infra.web.deps import get_component_tree
from infra.web.routers.schemas.component import ComponentResponseDTO

router = APIRouter(prefix="/api/components", tags=["Component"])


@router.get(
    "",
    response_model=list[ComponentResponseDTO],
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def get_components(component_tree: ComponentTree = Depends(get_component_tree)) -> list[Component]:
    return list(component_tree.components)


@router.get(
    "/{component_name}",
    response_model=ComponentResponseDTO,
    response_model_exclude_none=True,
    status_code=status.HTTP_200_OK,
)
async def get_component(
    component_name: str,
    component_tree: ComponentTree = Depends(get_component_tree),
) -> Component:
    try:
        return component_tree.get_component(component_name)
    except ComponentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")
