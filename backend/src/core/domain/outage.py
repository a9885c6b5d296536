from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from core.domain.severity import Severity


@dataclass
class Outage:
    id: Optional[int]

    component_name: str
    severity: Severity
    start_time: datetime
    discovered_from: str
    created_by: str

    end_time: Optional[datetime] = None
    auto_resolve: bool = True
    description: str = ""

    resolved_by: Optional[str] = None
    confirmed_by: Optional[str] = None
    confirmed_at: Optional[datetime] = None
    triage_notes: Optional[str] = None

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None

    def is_active(self, at: datetime) -> bool:
        return self.end_time is None or self.end_time > at
