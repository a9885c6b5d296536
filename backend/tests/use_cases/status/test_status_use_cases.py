from datetime import datetime, timedelta

import pytest

from core.domain.outage import Outage
from core.domain.severity import Severity
from core.domain.status_type import StatusType
from core.exceptions.component_not_found_error import ComponentNotFoundError
from core.exceptions.sub_component_not_found_error import SubComponentNotFoundError
from tests.support.fakes import FIXED_NOW, FakeOutageRepository, build_component_tree, fixed_clock, make_outage
from use_cases.status.get_all_component_statuses_use_case import GetAllComponentStatusesUseCase
from use_cases.status.get_component_status_use_case import GetComponentStatusUseCase
from use_cases.status.get_sub_component_status_use_case import GetSubComponentStatusUseCase


@pytest.mark.asyncio
async def test_sub_component_status_is_healthy_without_active_outages() -> None:
    repository = FakeOutageRepository(
        initial_outages=[make_outage(outage_id=1, end_time=FIXED_NOW - timedelta(hours=1))]
    )
    use_case = GetSubComponentStatusUseCase(build_component_tree(), repository, fixed_clock)

    result = await use_case.execute("Prow", "Tide")

    assert result.component_name == "Tide"
    assert result.status is StatusType.HEALTHY
    assert result.active_outages == []


@pytest.mark.asyncio
async def test_sub_component_status_uses_highest_active_severity() -> None:
    repository = FakeOutageRepository(
        initial_outages=[
            make_outage(outage_id=1, severity=Severity.SUSPECTED),
            make_outage(outage_id=2, severity=Severity.DOWN, end_time=FIXED_NOW + timedelta(hours=24)),
            make_outage(outage_id=3, severity=Severity.DEGRADED),
        ]
    )
    use_case = GetSubComponentStatusUseCase(build_component_tree(), repository, fixed_clock)

    result = await use_case.execute("Prow", "Tide")

    assert result.status is StatusType.DOWN
    assert {outage.id for outage in result.active_outages} == {1, 2, 3}


@pytest.mark.asyncio
async def test_sub_component_status_evaluates_at_clock_instant() -> None:
    repository = FakeOutageRepository()
    use_case = GetSubComponentStatusUseCase(build_component_tree(), repository, fixed_clock)

    await use_case.execute("Prow", "Deck")

    assert repository.active_calls == [(["Deck"], FIXED_NOW)]


@pytest.mark.asyncio
async def test_sub_component_status_rejects_unknown_scope() -> None:
    use_case = GetSubComponentStatusUseCase(build_component_tree(), FakeOutageRepository(), fixed_clock)

    with pytest.raises(ComponentNotFoundError):
        await use_case.execute("Nope", "Tide")

    with pytest.raises(SubComponentNotFoundError):
        await use_case.execute("Prow", "Nope")


@pytest.mark.asyncio
async def test_component_status_is_partial_when_some_sub_components_are_affected() -> None:
    repository = FakeOutageRepository(initial_outages=[make_outage(component_name="Tide", outage_id=1)])
    use_case = GetComponentStatusUseCase(build_component_tree(), repository, fixed_clock)

    result = await use_case.execute("Prow")

    assert result.component_name == "Prow"
    assert result.status is StatusType.PARTIAL
    assert [outage.id for outage in result.active_outages] == [1]


@pytest.mark.asyncio
async def test_component_status_uses_severity_when_every_sub_component_is_affected() -> None:
    repository = FakeOutageRepository(
        initial_outages=[
            make_outage(component_name="Tide", outage_id=1, severity=Severity.DEGRADED),
            make_outage(
                component_name="Deck",
                outage_id=2,
                severity=Severity.DOWN,
                start_time=FIXED_NOW - timedelta(minutes=5),
            ),
        ]
    )
    use_case = GetComponentStatusUseCase(build_component_tree(), repository, fixed_clock)

    result = await use_case.execute("Prow")

    assert result.status is StatusType.DOWN
    assert [outage.id for outage in result.active_outages] == [2, 1]


@pytest.mark.asyncio
async def test_component_status_without_sub_components_is_healthy() -> None:
    repository = FakeOutageRepository(initial_outages=[make_outage(component_name="Empty", outage_id=1)])
    use_case = GetComponentStatusUseCase(build_component_tree(), repository, fixed_clock)

    result = await use_case.execute("Empty")

    assert result.status is StatusType.HEALTHY
    assert result.active_outages == []


@pytest.mark.asyncio
async def test_component_status_rejects_unknown_component() -> None:
    use_case = GetComponentStatusUseCase(build_component_tree(), FakeOutageRepository(), fixed_clock)

    with pytest.raises(ComponentNotFoundError):
        await use_case.execute("Nope")


@pytest.mark.asyncio
async def test_all_component_statuses_follow_config_order_with_one_query() -> None:
    repository = FakeOutageRepository(
        initial_outages=[
            make_outage(component_name="build01", outage_id=1, severity=Severity.SUSPECTED),
            make_outage(component_name="Tide", outage_id=2, end_time=FIXED_NOW - timedelta(minutes=1)),
        ]
    )
    use_case = GetAllComponentStatusesUseCase(build_component_tree(), repository, fixed_clock)

    results = await use_case.execute()

    assert [(result.component_name, result.status) for result in results] == [
        ("Prow", StatusType.HEALTHY),
        ("Build Farm", StatusType.SUSPECTED),
        ("Empty", StatusType.HEALTHY),
    ]
    assert repository.active_calls == [(["Tide", "Deck", "build01"], FIXED_NOW)]


class UnfilteredOutageRepository(FakeOutageRepository):
    """Returns every outage for the names, ended ones included."""

    async def find_active_by_component_names(self, component_names: list[str], at: datetime) -> list[Outage]:
        self.active_calls.append((list(component_names), at))
        return await self.find_by_component_names(component_names)


@pytest.mark.asyncio
async def test_status_use_cases_only_count_outages_active_at_evaluation_instant() -> None:
    repository = UnfilteredOutageRepository(
        initial_outages=[
            make_outage(component_name="Tide", outage_id=1, end_time=FIXED_NOW - timedelta(minutes=1)),
            make_outage(component_name="Deck", outage_id=2, end_time=FIXED_NOW),
        ]
    )
    tree = build_component_tree()

    sub_component_status = await GetSubComponentStatusUseCase(tree, repository, fixed_clock).execute("Prow", "Tide")
    component_status = await GetComponentStatusUseCase(tree, repository, fixed_clock).execute("Prow")
    all_statuses = await GetAllComponentStatusesUseCase(tree, repository, fixed_clock).execute()

    assert sub_component_status.status is StatusType.HEALTHY
    assert sub_component_status.active_outages == []
    assert component_status.status is StatusType.HEALTHY
    assert component_status.active_outages == []
    assert all_statuses[0].status is StatusType.HEALTHY
