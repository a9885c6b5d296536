from datetime import datetime
from typing import Optional

from sqlalchemy import or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.domain.outage import Outage
from core.exceptions.outage_store_error import OutageStoreError
from core.port.outage_repository import OutageRepository
from infra.db.models import OutageModel
from infra.db.session import session_scope
from infra.utils.clock import as_utc, utc_now


def _optional_utc(moment: Optional[datetime]) -> Optional[datetime]:
    return as_utc(moment) if moment is not None else None


class PostgresOutageRepository(OutageRepository):
    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
    ) -> None:
        self._session_factory = session_factory

    async def save(self, outage: Outage) -> Outage:
        try:
            async with session_scope(self._session_factory) as session:
                model: Optional[OutageModel] = None

                if outage.id is not None and outage.id > 0:
                    model = await session.get(OutageModel, outage.id)

                if model is None:
                    model = OutageModel(
                        component_name=outage.component_name,
                        severity=outage.severity,
                        start_time=as_utc(outage.start_time),
                        discovered_from=outage.discovered_from,
                        created_by=outage.created_by,
                        end_time=_optional_utc(outage.end_time),
                        auto_resolve=outage.auto_resolve,
                        description=outage.description,
                        resolved_by=outage.resolved_by,
                        confirmed_by=outage.confirmed_by,
                        confirmed_at=_optional_utc(outage.confirmed_at),
                        triage_notes=outage.triage_notes,
                        deleted_at=_optional_utc(outage.deleted_at),
                    )
                    session.add(model)
                else:
                    model.component_name = outage.component_name
                    model.severity = outage.severity
                    model.start_time = as_utc(outage.start_time)
                    model.discovered_from = outage.discovered_from
                    model.created_by = outage.created_by
                    model.end_time = _optional_utc(outage.end_time)
                    model.auto_resolve = outage.auto_resolve
                    model.description = outage.description
                    model.resolved_by = outage.resolved_by
                    model.confirmed_by = outage.confirmed_by
                    model.confirmed_at = _optional_utc(outage.confirmed_at)
                    model.triage_notes = outage.triage_notes

                await session.flush()
                await session.refresh(model)

                return self._to_domain(model)
        except SQLAlchemyError as e:
            raise OutageStoreError("Failed to save outage") from e

    async def find_by_id(self, outage_id: int) -> Optional[Outage]:
        try:
            async with self._session_factory() as session:
                statement = select(OutageModel).where(
                    OutageModel.id == outage_id,
                    OutageModel.deleted_at.is_(None),
                )

                model = (await session.execute(statement)).scalar_one_or_none()

                return self._to_domain(model) if model is not None else None
        except SQLAlchemyError as e:
            raise OutageStoreError("Failed to get outage") from e

    async def find_by_component_names(self, component_names: list[str]) -> list[Outage]:
        if not component_names:
            return []

        try:
            async with self._session_factory() as session:
                statement = (
                    select(OutageModel)
                    .where(
                        OutageModel.component_name.in_(component_names),
                        OutageModel.deleted_at.is_(None),
                    )
                    .order_by(OutageModel.start_time.desc(), OutageModel.id.desc())
                )

                models = (await session.execute(statement)).scalars().all()

                return [self._to_domain(model) for model in models]
        except SQLAlchemyError as e:
            raise OutageStoreError("Failed to get outages") from e

    async def find_active_by_component_names(self, component_names: list[str], at: datetime) -> list[Outage]:
        if not component_names:
            return []

        try:
            async with self._session_factory() as session:
                statement = (
                    select(OutageModel)
                    .where(
                        OutageModel.component_name.in_(component_names),
                        OutageModel.deleted_at.is_(None),
                        or_(OutageModel.end_time.is_(None), OutageModel.end_time > as_utc(at)),
                    )
                    .order_by(OutageModel.start_time.desc(), OutageModel.id.desc())
                )

                models = (await session.execute(statement)).scalars().all()

                return [self._to_domain(model) for model in models]
        except SQLAlchemyError as e:
            raise OutageStoreError("Failed to get active outages") from e

    async def delete(self, outage_id: int) -> bool:
        try:
            async with session_scope(self._session_factory) as session:
                model = await session.get(OutageModel, outage_id)

                if model is None or model.deleted_at is not None:
                    return False

                model.deleted_at = utc_now()

                return True
        except SQLAlchemyError as e:
            raise OutageStoreError("Failed to delete outage") from e

    def _to_domain(self, model: OutageModel) -> Outage:
        return Outage(
            id=model.id,
            component_name=model.component_name,
            severity=model.severity,
            start_time=as_utc(model.start_time),
            discovered_from=model.discovered_from,
            created_by=model.created_by,
            end_time=_optional_utc(model.end_time),
            auto_resolve=model.auto_resolve,
            description=model.description,
            resolved_by=model.resolved_by,
            confirmed_by=model.confirmed_by,
            confirmed_at=_optional_utc(model.confirmed_at),
            triage_notes=model.triage_notes,
            created_at=_optional_utc(model.created_at),
            updated_at=_optional_utc(model.updated_at),
            deleted_at=_optional_utc(model.deleted_at),
        )
