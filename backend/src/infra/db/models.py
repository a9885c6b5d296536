from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import Boolean, DateTime, Enum, Integer, String, Text, func, true
from sqlalchemy.orm import DeclarativeBase, Mapped, MappedAsDataclass, mapped_column

from core.domain.severity import Severity


class Base(MappedAsDataclass, DeclarativeBase):
    pass


class OutageModel(Base):
    __tablename__ = "outages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, init=False)

    component_name: Mapped[str] = mapped_column(String(255), index=True)
    severity: Mapped[Severity] = mapped_column(
        Enum(
            Severity,
            native_enum=False,
            name="outage_severity",
            values_callable=lambda severities: [severity.value for severity in severities],
        ),
    )
    start_time: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    discovered_from: Mapped[str] = mapped_column(String(255))
    created_by: Mapped[str] = mapped_column(String(255))

    end_time: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=None, index=True)
    auto_resolve: Mapped[bool] = mapped_column(Boolean, default=True, server_default=true())
    description: Mapped[str] = mapped_column(Text, default="")

    resolved_by: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    confirmed_by: Mapped[Optional[str]] = mapped_column(String(255), default=None)
    confirmed_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=None)
    triage_notes: Mapped[Optional[str]] = mapped_column(Text, default=None)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        init=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default_factory=lambda: datetime.now(timezone.utc),
        server_default=func.now(),
        onupdate=lambda: datetime.now(timezone.utc),
        init=False,
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True), default=None, index=True)
