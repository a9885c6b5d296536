from pathlib import Path
from typing import Optional

import structlog
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from core.domain.component import Component
from core.domain.component_tree import ComponentTree
from core.domain.owner import Owner
from core.domain.sub_component import SubComponent
from core.exceptions.component_config_error import ComponentConfigError

logger = structlog.stdlib.get_logger(__name__)


class OwnerDocument(BaseModel):
    rover_group: Optional[str] = None
    service_account: Optional[str] = None


class SubComponentDocument(BaseModel):
    name: str
    description: str = ""
    managed: bool = False
    requires_confirmation: bool = False

    @field_validator("name", mode="after")
    @classmethod
    def is_name_present(cls, name: str) -> str:
        if not name.strip():
            raise ValueError("Sub-component name cannot be empty")

        return name


class ComponentDocument(BaseModel):
    name: str
    description: str = ""
    ship_team: str = ""
    slack_channel: str = ""
    sub_components: list[SubComponentDocument] = Field(default_factory=list)
    owners: list[OwnerDocument] = Field(default_factory=list)

    @field_validator("name", mode="after")
    @classmethod
    def is_name_present(cls, name: str) -> str:
        if not name.strip():
            raise ValueError("Component name cannot be empty")

        return name


class ComponentConfigDocument(BaseModel):
    components: list[ComponentDocument] = Field(default_factory=list)


def _check_unique_names(path: str, document: ComponentConfigDocument) -> None:
    component_names: set[str] = set()
    sub_component_owners: dict[str, str] = {}

    for component in document.components:
        if component.name in component_names:
            raise ComponentConfigError(path, f"duplicate component name '{component.name}'")
        component_names.add(component.name)

        for sub_component in component.sub_components:
            owner = sub_component_owners.get(sub_component.name)
            if owner is not None:
                raise ComponentConfigError(
                    path,
                    f"sub-component name '{sub_component.name}' is used by both '{owner}' and '{component.name}'",
                )
            sub_component_owners[sub_component.name] = component.name


def _to_domain(document: ComponentConfigDocument) -> ComponentTree:
    return ComponentTree(
        components=tuple(
            Component(
                name=component.name,
                description=component.description,
                ship_team=component.ship_team,
                slack_channel=component.slack_channel,
                sub_components=tuple(
                    SubComponent(
                        name=sub_component.name,
                        description=sub_component.description,
                        managed=sub_component.managed,
                        requires_confirmation=sub_component.requires_confirmation,
                    )
                    for sub_component in component.sub_components
                ),
                owners=tuple(
                    Owner(rover_group=owner.rover_group, service_account=owner.service_account)
                    for owner in component.owners
                ),
            )
            for component in document.components
        )
    )


def parse_component_tree(raw: object, path: str = "<memory>") -> ComponentTree:
    if raw is None:
        raw = {}

    try:
        document = ComponentConfigDocument.model_validate(raw)
    except ValidationError as e:
        raise ComponentConfigError(path, str(e)) from e

    _check_unique_names(path, document)

    return _to_domain(document)


def load_component_tree(path: str | Path) -> ComponentTree:
    config_path = Path(path)
    logger.info("Loading component config", config_path=str(config_path))

    try:
        with config_path.open("r", encoding="utf-8") as config_file:
            raw = yaml.safe_load(config_file)
    except OSError as e:
        raise ComponentConfigError(str(config_path), f"cannot read file: {e}") from e
    except yaml.YAMLError as e:
        raise ComponentConfigError(str(config_path), f"cannot parse YAML: {e}") from e

    tree = parse_component_tree(raw, str(config_path))

    logger.info("Loaded component config", component_count=len(tree.components))

    return tree
