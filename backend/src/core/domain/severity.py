from enum import Enum

from core.domain.status_type import StatusType


class Severity(str, Enum):
    DOWN = "Down"
    DEGRADED = "Degraded"
    SUSPECTED = "Suspected"

    @property
    def level(self) -> int:
        mapping = {
            Severity.DOWN: 3,
            Severity.DEGRADED: 2,
            Severity.SUSPECTED: 1,
        }

        return mapping[self]

    def to_status(self) -> StatusType:
        mapping = {
            Severity.DOWN: StatusType.DOWN,
            Severity.DEGRADED: StatusType.DEGRADED,
            Severity.SUSPECTED: StatusType.SUSPECTED,
        }

        return mapping[self]

    @classmethod
    def names(cls) -> list[str]:
        return [member.value for member in cls]
