from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Owner:
    rover_group: Optional[str] = None
    service_account: Optional[str] = None
