from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from core.domain.outage import Outage


class OutageRepository(ABC):
    @abstractmethod
    async def save(self, outage: Outage) -> Outage:
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, outage_id: int) -> Optional[Outage]:
        raise NotImplementedError

    @abstractmethod
    async def find_by_component_names(self, component_names: list[str]) -> list[Outage]:
        """All non-deleted outages for the names, most recent ``start_time`` first."""
        raise NotImplementedError

    @abstractmethod
    async def find_active_by_component_names(self, component_names: list[str], at: datetime) -> list[Outage]:
        """Non-deleted outages whose ``end_time`` is unset or later than ``at``."""
        raise NotImplementedError

    @abstractmethod
    async def delete(self, outage_id: int) -> bool:
        raise NotImplementedError
