"""Pydantic configuration models for BizBuzz components."""

from typing import Literal

from pydantic import BaseModel, Field

# ============================================================
# Gateway Configs
# ============================================================


class SimulatedGatewayConfig(BaseModel):
    """Configuration for SimulatedGateway.

    Latencies are in seconds. The defaults mirror the hosted demo service.
    """

    type: Literal["simulated"] = "simulated"
    record_latency: float = Field(default=1.5, ge=0.0)
    headline_latency: float = Field(default=1.0, ge=0.0)
    record_failure_rate: float = Field(default=0.05, ge=0.0, le=1.0)
    headline_failure_rate: float = Field(default=0.03, ge=0.0, le=1.0)
    seed: int | None = None

    model_config = {"frozen": True}


GatewayConfig = SimulatedGatewayConfig


# ============================================================
# Logging Config
# ============================================================


class LoggingConfig(BaseModel):
    """Configuration for per-session action logging."""

    enabled: bool = False
    log_dir: str = "logs"

    model_config = {"frozen": True}


# ============================================================
# Root Config
# ============================================================


class BizBuzzConfig(BaseModel):
    """Root configuration for BizBuzz."""

    gateway: GatewayConfig = Field(default_factory=SimulatedGatewayConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    strict: bool = False

    model_config = {"frozen": True}
