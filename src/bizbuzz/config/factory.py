"""Factory functions to create components from configuration."""

import random
from pathlib import Path

from bizbuzz.config.models import BizBuzzConfig, GatewayConfig, SimulatedGatewayConfig
from bizbuzz.controller import BusinessController
from bizbuzz.gateway import BusinessGateway, SimulatedGateway
from bizbuzz.generator import BusinessDataGenerator
from bizbuzz.session_log import SessionLogger


def create_gateway(config: GatewayConfig) -> BusinessGateway:
    """Create a gateway from config.

    A ``seed`` makes both the generated data and the failure draws
    reproducible.
    """
    if isinstance(config, SimulatedGatewayConfig):
        rng = random.Random(config.seed) if config.seed is not None else None
        return SimulatedGateway(
            BusinessDataGenerator(rng),
            record_latency=config.record_latency,
            headline_latency=config.headline_latency,
            record_failure_rate=config.record_failure_rate,
            headline_failure_rate=config.headline_failure_rate,
            rng=rng,
        )
    msg = f"Unknown gateway config type: {type(config)}"
    raise ValueError(msg)


def create_from_config(
    config: BizBuzzConfig,
    *,
    log_override: bool | None = None,
    log_dir_override: str | None = None,
) -> tuple[BusinessController, SessionLogger | None]:
    """Create a controller wired to the configured gateway.

    Args:
        config: Root configuration.
        log_override: Override the config's logging.enabled setting.
        log_dir_override: Override the config's logging.log_dir setting.

    Returns:
        Tuple of (controller, session_logger).
        session_logger is None if logging is disabled.
    """
    log_enabled = log_override if log_override is not None else config.logging.enabled
    log_dir = Path(log_dir_override if log_dir_override is not None else config.logging.log_dir)

    session_logger: SessionLogger | None = None
    if log_enabled:
        session_logger = SessionLogger(log_dir=log_dir, enabled=True)

    controller = BusinessController(
        create_gateway(config.gateway),
        session_logger=session_logger,
        strict=config.strict,
    )
    return (controller, session_logger)
