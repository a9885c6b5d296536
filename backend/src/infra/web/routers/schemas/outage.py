from datetime import datetime
from typing import Optional, Self

from pydantic import model_validator

from core.domain.severity import Severity
from infra.web.routers.schemas import ApiModel

# Go-style zero timestamps ("0001-01-01T00:00:00Z") mean "not set".
_ZERO_YEAR = 1


def parse_severity(severity: Optional[str]) -> Severity:
    if severity is None or not severity.strip():
        raise ValueError("Severity is required")

    try:
        return Severity(severity)
    except ValueError:
        raise ValueError(
            f"Invalid severity '{severity}'. Must be one of: {', '.join(Severity.names())}"
        ) from None


def _is_zero_time(moment: Optional[datetime]) -> bool:
    return moment is None or moment.year <= _ZERO_YEAR


class OutageCreateDTO(ApiModel):
    severity: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    auto_resolve: bool = True
    description: str = ""
    discovered_from: str = ""
    created_by: str = ""

    @model_validator(mode="after")
    def check_required_fields(self) -> Self:
        self.severity = parse_severity(self.severity).value

        if _is_zero_time(self.start_time):
            raise ValueError("StartTime is required")

        if not self.discovered_from.strip():
            raise ValueError("DiscoveredFrom is required")

        if not self.created_by.strip():
            raise ValueError("CreatedBy is required")

        return self


class OutageUpdateDTO(ApiModel):
    severity: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    auto_resolve: Optional[bool] = None
    description: Optional[str] = None
    resolved_by: Optional[str] = None
    confirmed_by: Optional[str] = None
    confirmed_at: Optional[datetime] = None
    triage_notes: Optional[str] = None

    @model_validator(mode="after")
    def check_update_fields(self) -> Self:
        supplied = self.model_fields_set

        if "severity" in supplied:
            self.severity = parse_severity(self.severity).value

        if "start_time" in supplied and _is_zero_time(self.start_time):
            raise ValueError("StartTime cannot be cleared")

        for field_name in ("auto_resolve", "description"):
            if field_name in supplied and getattr(self, field_name) is None:
                raise ValueError(f"{field_name} cannot be null")

        return self

    def updates(self) -> dict:
        """Only the fields present in the request body; explicit nulls clear a field."""
        return self.model_dump(exclude_unset=True)


class OutageResponseDTO(ApiModel):
    id: int
    component_name: str
    severity: Severity
    start_time: datetime
    end_time: Optional[datetime] = None
    auto_resolve: bool
    description: str
    discovered_from: str
    created_by: str
    resolved_by: Optional[str] = None
    confirmed_by: Optional[str] = None
    confirmed_at: Optional[datetime] = None
    triage_notes: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
