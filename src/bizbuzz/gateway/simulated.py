"""In-process gateway that simulates a flaky remote service."""

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable

from bizbuzz.data import BusinessIdentity, BusinessRecord
from bizbuzz.errors import NetworkError
from bizbuzz.generator import BusinessDataGenerator, DataGenerator

logger = logging.getLogger(__name__)

RECORD_FAILURE_MESSAGE = "Network error - please try again"
HEADLINE_FAILURE_MESSAGE = "Failed to regenerate headline - please try again"


class SimulatedGateway:
    """Wrap a data generator with artificial latency and random failures.

    Each call first waits its latency, then fails with ``NetworkError`` at
    the configured rate, otherwise returns generated data. A failure rate
    of 0.0 always succeeds and 1.0 always fails.

    Args:
        generator: Data generator (defaults to ``BusinessDataGenerator()``).
        record_latency: Seconds to wait in ``fetch_record``.
        headline_latency: Seconds to wait in ``fetch_headline``.
        record_failure_rate: Failure probability for ``fetch_record``.
        headline_failure_rate: Failure probability for ``fetch_headline``.
        rng: Random source for failure draws.
        sleep: Awaitable sleep function (``asyncio.sleep`` by default).
    """

    def __init__(
        self,
        generator: DataGenerator | None = None,
        *,
        record_latency: float = 1.5,
        headline_latency: float = 1.0,
        record_failure_rate: float = 0.05,
        headline_failure_rate: float = 0.03,
        rng: random.Random | None = None,
        sleep: Callable[[float], Awaitable[object]] = asyncio.sleep,
    ) -> None:
        for label, latency in (("record_latency", record_latency), ("headline_latency", headline_latency)):
            if latency < 0:
                raise ValueError(f"{label} must be >= 0, got {latency}")
        for label, rate in (
            ("record_failure_rate", record_failure_rate),
            ("headline_failure_rate", headline_failure_rate),
        ):
            if not 0.0 <= rate <= 1.0:
                raise ValueError(f"{label} must be within [0, 1], got {rate}")

        self._generator = generator or BusinessDataGenerator()
        self._record_latency = record_latency
        self._headline_latency = headline_latency
        self._record_failure_rate = record_failure_rate
        self._headline_failure_rate = headline_failure_rate
        self._rng = rng or random.Random()
        self._sleep = sleep

    async def fetch_record(self, identity: BusinessIdentity) -> BusinessRecord:
        """Simulate ``POST /business-data``.

        Raises:
            NetworkError: With probability ``record_failure_rate``.
        """
        await self._sleep(self._record_latency)
        if self._should_fail(self._record_failure_rate):
            logger.debug("Injected failure in fetch_record for %r", identity.name)
            raise NetworkError(RECORD_FAILURE_MESSAGE, operation="fetch_record")

        metrics = self._generator.generate_record(identity)
        return BusinessRecord.from_metrics(identity, metrics)

    async def fetch_headline(self, identity: BusinessIdentity) -> str:
        """Simulate ``GET /regenerate-headline``.

        Raises:
            NetworkError: With probability ``headline_failure_rate``.
        """
        await self._sleep(self._headline_latency)
        if self._should_fail(self._headline_failure_rate):
            logger.debug("Injected failure in fetch_headline for %r", identity.name)
            raise NetworkError(HEADLINE_FAILURE_MESSAGE, operation="fetch_headline")

        return self._generator.generate_headline(identity)

    def _should_fail(self, rate: float) -> bool:
        # random() is in [0, 1), so rate 0.0 never fails and 1.0 always does
        return self._rng.random() < rate
