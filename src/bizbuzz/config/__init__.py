"""Configuration module for BizBuzz."""

from bizbuzz.config.factory import create_from_config, create_gateway
from bizbuzz.config.loader import get_default_config_path, load_config
from bizbuzz.config.models import (
    BizBuzzConfig,
    GatewayConfig,
    LoggingConfig,
    SimulatedGatewayConfig,
)

__all__ = [
    "BizBuzzConfig",
    "GatewayConfig",
    "LoggingConfig",
    "SimulatedGatewayConfig",
    "create_from_config",
    "create_gateway",
    "get_default_config_path",
    "load_config",
]
