from use_cases.status.get_all_component_statuses_use_case import GetAllComponentStatusesUseCase
from use_cases.status.get_component_status_use_case import GetComponentStatusUseCase
from use_cases.status.get_sub_component_status_use_case import GetSubComponentStatusUseCase

__all__ = [
    "GetAllComponentStatusesUseCase",
    "GetComponentStatusUseCase",
    "GetSubComponentStatusUseCase",
]
