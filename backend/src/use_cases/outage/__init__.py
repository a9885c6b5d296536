from use_cases.outage.create_outage_use_case import CreateOutageUseCase
from use_cases.outage.delete_outage_use_case import DeleteOutageUseCase
from use_cases.outage.get_outage_use_case import GetOutageUseCase
from use_cases.outage.get_outages_use_case import GetOutagesUseCase
from use_cases.outage.update_outage_use_case import UpdateOutageUseCase

__all__ = [
    "CreateOutageUseCase",
    "DeleteOutageUseCase",
    "GetOutageUseCase",
    "GetOutagesUseCase",
    "UpdateOutageUseCase",
]
