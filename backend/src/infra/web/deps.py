from typing import TypeVar

from fastapi import Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError

from core.domain.component_tree import ComponentTree
from core.domain.sub_component import SubComponent
from core.exceptions.component_not_found_error import ComponentNotFoundError
from core.exceptions.sub_component_not_found_error import SubComponentNotFoundError
from core.port.outage_repository import OutageRepository
from infra.utils.clock import Clock
from infra.web.routers.schemas.outage import OutageCreateDTO, OutageUpdateDTO

PayloadT = TypeVar("PayloadT", bound=BaseModel)


def get_component_tree(request: Request) -> ComponentTree:
    return request.app.state.component_tree


def get_outage_repository(request: Request) -> OutageRepository:
    return request.app.state.outage_repository


def get_clock(request: Request) -> Clock:
    return request.app.state.clock


def resolve_scope(
    component_name: str,
    sub_component_name: str,
    component_tree: ComponentTree = Depends(get_component_tree),
) -> SubComponent:
    """Resolve the sub-component of the path before any id or body validation runs."""
    try:
        return component_tree.resolve_sub_component(component_name, sub_component_name)
    except ComponentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Component not found")
    except SubComponentNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Sub-component not found")


async def _read_json_body(request: Request) -> object:
    try:
        return await request.json()
    except ValueError as e:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "JSON decode error", "input": {}}]
        ) from e


def _validate_payload(model: type[PayloadT], raw: object) -> PayloadT:
    try:
        return model.model_validate(raw)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False)) from e


async def get_outage_create_payload(
    request: Request,
    _: SubComponent = Depends(resolve_scope),
) -> OutageCreateDTO:
    return _validate_payload(OutageCreateDTO, await _read_json_body(request))


async def get_outage_update_payload(
    request: Request,
    _: SubComponent = Depends(resolve_scope),
) -> OutageUpdateDTO:
    return _validate_payload(OutageUpdateDTO, await _read_json_body(request))
