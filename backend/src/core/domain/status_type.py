from enum import Enum


class StatusType(str, Enum):
    HEALTHY = "Healthy"
    SUSPECTED = "Suspected"
    DEGRADED = "Degraded"
    DOWN = "Down"
    # Some sub-components have active outages, others are healthy
    PARTIAL = "Partial"
