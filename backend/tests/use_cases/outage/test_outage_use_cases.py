from datetime import timedelta

import pytest

from core.domain.severity import Severity
from core.exceptions.component_not_found_error import ComponentNotFoundError
from core.exceptions.outage_not_found_error import OutageNotFoundError
from core.exceptions.sub_component_not_found_error import SubComponentNotFoundError
from infra.web.routers.schemas.outage import OutageCreateDTO, OutageUpdateDTO
from tests.support.fakes import FIXED_NOW, FakeOutageRepository, build_component_tree, make_outage
from use_cases.outage.create_outage_use_case import CreateOutageUseCase
from use_cases.outage.delete_outage_use_case import DeleteOutageUseCase
from use_cases.outage.get_outage_use_case import GetOutageUseCase
from use_cases.outage.get_outages_use_case import GetOutagesUseCase
from use_cases.outage.update_outage_use_case import UpdateOutageUseCase


def _create_payload(**overrides) -> OutageCreateDTO:
    values = {
        "severity": "Down",
        "start_time": FIXED_NOW - timedelta(minutes=30),
        "discovered_from": "alerting",
        "created_by": "oncall",
    }
    values.update(overrides)
    return OutageCreateDTO(**values)


@pytest.mark.asyncio
async def test_create_outage_use_case_records_outage_against_sub_component() -> None:
    repository = FakeOutageRepository()
    use_case = CreateOutageUseCase(build_component_tree(), repository)

    created = await use_case.execute("Prow", "Tide", _create_payload(description="Tide is stuck"))

    assert created.id == 1
    assert created.component_name == "Tide"
    assert created.severity is Severity.DOWN
    assert created.auto_resolve is True
    assert created.description == "Tide is stuck"
    assert await repository.find_by_id(1) is not None


@pytest.mark.asyncio
async def test_create_outage_use_case_rejects_unknown_scope() -> None:
    use_case = CreateOutageUseCase(build_component_tree(), FakeOutageRepository())

    with pytest.raises(ComponentNotFoundError):
        await use_case.execute("Nope", "Tide", _create_payload())

    with pytest.raises(SubComponentNotFoundError):
        await use_case.execute("Prow", "build01", _create_payload())


@pytest.mark.asyncio
async def test_get_outages_use_case_aggregates_direct_sub_components() -> None:
    repository = FakeOutageRepository(
        initial_outages=[
            make_outage(component_name="Tide", outage_id=1, start_time=FIXED_NOW - timedelta(days=1)),
            make_outage(component_name="Deck", outage_id=2, start_time=FIXED_NOW - timedelta(hours=1)),
            make_outage(component_name="build01", outage_id=3),
        ]
    )
    use_case = GetOutagesUseCase(build_component_tree(), repository)

    component_outages = await use_case.execute("Prow")
    sub_component_outages = await use_case.execute("Prow", "Tide")

    assert [outage.id for outage in component_outages] == [2, 1]
    assert [outage.id for outage in sub_component_outages] == [1]


@pytest.mark.asyncio
async def test_get_outages_use_case_for_component_without_sub_components_is_empty() -> None:
    repository = FakeOutageRepository(initial_outages=[make_outage(component_name="Empty", outage_id=1)])
    use_case = GetOutagesUseCase(build_component_tree(), repository)

    assert await use_case.execute("Empty") == []


@pytest.mark.asyncio
async def test_get_outage_use_case_hides_outage_of_another_sub_component() -> None:
    repository = FakeOutageRepository(initial_outages=[make_outage(component_name="Deck", outage_id=7)])
    use_case = GetOutageUseCase(build_component_tree(), repository)

    assert (await use_case.execute("Prow", "Deck", 7)).id == 7

    with pytest.raises(OutageNotFoundError) as exc_info:
        await use_case.execute("Prow", "Tide", 7)

    assert exc_info.value.outage_id == 7


@pytest.mark.asyncio
async def test_update_outage_use_case_applies_only_supplied_fields() -> None:
    repository = FakeOutageRepository(
        initial_outages=[make_outage(outage_id=1, description="original", triage_notes="initial notes")]
    )
    use_case = UpdateOutageUseCase(build_component_tree(), repository)

    updated = await use_case.execute(
        "Prow",
        "Tide",
        1,
        OutageUpdateDTO.model_validate({"severity": "Degraded", "triage_notes": None}),
    )

    assert updated.severity is Severity.DEGRADED
    assert updated.description == "original"
    assert updated.triage_notes is None
    assert updated.start_time == FIXED_NOW - timedelta(hours=1)


@pytest.mark.asyncio
async def test_update_outage_use_case_moves_end_time() -> None:
    repository = FakeOutageRepository(initial_outages=[make_outage(outage_id=1)])
    use_case = UpdateOutageUseCase(build_component_tree(), repository)
    new_end_time = FIXED_NOW + timedelta(hours=24)

    updated = await use_case.execute(
        "Prow",
        "Tide",
        1,
        OutageUpdateDTO.model_validate({"end_time": new_end_time.isoformat(), "resolved_by": "oncall"}),
    )

    assert updated.end_time == new_end_time
    assert updated.resolved_by == "oncall"
    assert updated.is_active(FIXED_NOW) is True


@pytest.mark.asyncio
async def test_update_outage_use_case_raises_for_missing_outage() -> None:
    use_case = UpdateOutageUseCase(build_component_tree(), FakeOutageRepository())

    with pytest.raises(OutageNotFoundError):
        await use_case.execute("Prow", "Tide", 99, OutageUpdateDTO())


@pytest.mark.asyncio
async def test_delete_outage_use_case_soft_deletes_once() -> None:
    repository = FakeOutageRepository(initial_outages=[make_outage(outage_id=1)])
    use_case = DeleteOutageUseCase(build_component_tree(), repository)

    await use_case.execute("Prow", "Tide", 1)

    assert await repository.find_by_id(1) is None

    with pytest.raises(OutageNotFoundError):
        await use_case.execute("Prow", "Tide", 1)


@pytest.mark.asyncio
async def test_delete_outage_use_case_rejects_unknown_sub_component() -> None:
    repository = FakeOutageRepository(initial_outages=[make_outage(outage_id=1)])
    use_case = DeleteOutageUseCase(build_component_tree(), repository)

    with pytest.raises(SubComponentNotFoundError):
        await use_case.execute("Prow", "Nope", 1)

    assert await repository.find_by_id(1) is not None
