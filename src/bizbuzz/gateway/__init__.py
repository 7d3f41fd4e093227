"""Service boundary for fetching business data."""

from bizbuzz.gateway.base import BusinessGateway
from bizbuzz.gateway.simulated import (
    HEADLINE_FAILURE_MESSAGE,
    RECORD_FAILURE_MESSAGE,
    SimulatedGateway,
)

__all__ = [
    "HEADLINE_FAILURE_MESSAGE",
    "RECORD_FAILURE_MESSAGE",
    "BusinessGateway",
    "SimulatedGateway",
]
