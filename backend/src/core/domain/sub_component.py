from dataclasses import dataclass


@dataclass(frozen=True)
class SubComponent:
    name: str
    description: str = ""

    managed: bool = False
    requires_confirmation: bool = False
