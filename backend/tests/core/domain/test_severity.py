import pytest

from core.domain.severity import Severity
from core.domain.status_type import StatusType


def test_severity_ordering() -> None:
    assert Severity.SUSPECTED.level < Severity.DEGRADED.level < Severity.DOWN.level


@pytest.mark.parametrize(
    ("severity", "status"),
    [
        (Severity.DOWN, StatusType.DOWN),
        (Severity.DEGRADED, StatusType.DEGRADED),
        (Severity.SUSPECTED, StatusType.SUSPECTED),
    ],
)
def test_every_severity_maps_to_the_same_named_status(severity: Severity, status: StatusType) -> None:
    assert severity.to_status() is status
    assert severity.value == status.value


def test_severity_rejects_unknown_values() -> None:
    with pytest.raises(ValueError):
        Severity("InvalidSeverity")


def test_severity_names_lists_wire_values() -> None:
    assert Severity.names() == ["Down", "Degraded", "Suspected"]
