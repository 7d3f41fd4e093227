"""Application state controller for the business reputation card."""

import logging
import time

from bizbuzz.data import (
    AppState,
    BusinessIdentity,
    BusinessRecord,
    Loaded,
    Notice,
    NoticeLevel,
    Phase,
    Regenerating,
    Submitting,
    Unset,
    ViewState,
)
from bizbuzz.errors import NetworkError, TransitionRejected
from bizbuzz.gateway import BusinessGateway
from bizbuzz.session_log import SessionLogger
from bizbuzz.validation import validate

logger = logging.getLogger(__name__)

LOAD_SUCCESS = Notice(NoticeLevel.SUCCESS, "Success!", "Business data loaded successfully")
LOAD_FAILURE = Notice(NoticeLevel.ERROR, "Error", "Failed to load business data. Please try again.")
REGENERATE_SUCCESS = Notice(
    NoticeLevel.SUCCESS, "Headline Updated!", "New AI-generated headline created successfully"
)
REGENERATE_FAILURE = Notice(
    NoticeLevel.ERROR, "Error", "Failed to regenerate headline. Please try again."
)

EDITABLE_FIELDS = ("name", "location")


class BusinessController:
    """Owns the application state and the rules for moving between phases.

    Flow:
    1. ``unset`` --submit (valid)--> ``submitting`` --ok--> ``loaded``
    2. ``submitting`` --network failure--> ``unset`` (draft kept)
    3. ``loaded`` --regenerate--> ``regenerating`` --ok/failure--> ``loaded``
    4. ``loaded`` --reset--> ``unset`` (record discarded)

    Only one action is reachable from each phase and the phase moves away
    from it before the gateway is awaited, so at most one gateway call is
    ever outstanding. A trigger arriving in the wrong phase is ignored
    (or raises ``TransitionRejected`` when ``strict`` is set).

    Args:
        gateway: Service boundary used for both fetches.
        session_logger: Optional SessionLogger recording every action.
        strict: Raise on rejected triggers instead of ignoring them.
    """

    def __init__(
        self,
        gateway: BusinessGateway,
        *,
        session_logger: SessionLogger | None = None,
        strict: bool = False,
    ) -> None:
        self._gateway = gateway
        self._session_logger = session_logger
        self._strict = strict
        self._state: AppState = Unset()
        self._draft = BusinessIdentity()
        self._field_errors: dict[str, str] = {}
        self._notices: list[Notice] = []

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def phase(self) -> Phase:
        return self._state.phase

    @property
    def record(self) -> BusinessRecord | None:
        """Current record, or None while unset or submitting."""
        if isinstance(self._state, Loaded | Regenerating):
            return self._state.record
        return None

    def snapshot(self) -> ViewState:
        """Return the observable state for rendering."""
        return ViewState(
            phase=self.phase,
            record=self.record,
            field_errors=dict(self._field_errors),
            draft=self._draft,
        )

    def drain_notices(self) -> list[Notice]:
        """Return and clear pending user notices, oldest first."""
        notices, self._notices = self._notices, []
        return notices

    def update_field(self, field: str, value: str) -> ViewState:
        """Edit one form field, clearing any error shown for it.

        Args:
            field: "name" or "location".
            value: New raw value.

        Raises:
            ValueError: If ``field`` is not an identity field.
        """
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Unknown field: {field!r}")
        if not isinstance(self._state, Unset):
            return self._reject("update_field")

        if field == "name":
            self._draft = BusinessIdentity(name=value, location=self._draft.location)
        else:
            self._draft = BusinessIdentity(name=self._draft.name, location=value)
        self._field_errors.pop(field, None)
        return self.snapshot()

    async def submit_identity(self, name: str, location: str) -> ViewState:
        """Validate an identity and, if valid, fetch its record.

        Validation errors are reported through ``field_errors`` without
        leaving ``unset``. A failed fetch returns to ``unset`` with the
        entered values still in ``draft``.
        """
        if not isinstance(self._state, Unset):
            return self._reject("submit_identity")

        self._draft = BusinessIdentity(name=name, location=location)
        errors = validate(name, location)
        if errors:
            self._field_errors = errors
            self._log_action("submit_identity", Phase.UNSET, "invalid", detail=", ".join(errors))
            return self.snapshot()

        self._field_errors = {}
        identity = self._draft
        self._state = Submitting(identity)
        t0 = time.monotonic()
        try:
            record = await self._gateway.fetch_record(identity)
        except NetworkError as e:
            self._state = Unset()
            self._notices.append(LOAD_FAILURE)
            logger.warning(f"Error fetching business data for {identity.name!r}: {e}")
            self._log_action(
                "submit_identity",
                Phase.UNSET,
                "failed",
                detail=str(e),
                duration=time.monotonic() - t0,
            )
            return self.snapshot()
        except BaseException:
            self._state = Unset()
            raise

        self._state = Loaded(record)
        self._notices.append(LOAD_SUCCESS)
        logger.info(
            f"Loaded {record.name} ({record.location}): "
            f"rating={record.rating} reviews={record.reviews}"
        )
        self._log_action("submit_identity", Phase.UNSET, "ok", duration=time.monotonic() - t0)
        return self.snapshot()

    async def request_headline_regeneration(self) -> ViewState:
        """Replace the current record's headline with a freshly fetched one.

        The existing record stays visible throughout. On failure it is kept
        unchanged.
        """
        if not isinstance(self._state, Loaded):
            return self._reject("request_headline_regeneration")

        record = self._state.record
        self._state = Regenerating(record)
        t0 = time.monotonic()
        try:
            headline = await self._gateway.fetch_headline(record.identity)
        except NetworkError as e:
            self._state = Loaded(record)
            self._notices.append(REGENERATE_FAILURE)
            logger.warning(f"Error regenerating headline for {record.name!r}: {e}")
            self._log_action(
                "request_headline_regeneration",
                Phase.LOADED,
                "failed",
                detail=str(e),
                duration=time.monotonic() - t0,
            )
            return self.snapshot()
        except BaseException:
            self._state = Loaded(record)
            raise

        self._state = Loaded(record.with_headline(headline))
        self._notices.append(REGENERATE_SUCCESS)
        logger.info(f"New headline for {record.name}: {headline}")
        self._log_action(
            "request_headline_regeneration", Phase.LOADED, "ok", duration=time.monotonic() - t0
        )
        return self.snapshot()

    def reset_to_form(self) -> ViewState:
        """Discard the loaded record and show the form again."""
        if not isinstance(self._state, Loaded):
            return self._reject("reset_to_form")

        discarded = self._state.record
        self._state = Unset()
        self._field_errors = {}
        logger.info(f"Discarded record for {discarded.name}")
        self._log_action("reset_to_form", Phase.LOADED, "ok")
        return self.snapshot()

    def _reject(self, action: str) -> ViewState:
        phase = self.phase
        self._log_action(action, phase, "rejected")
        if self._strict:
            raise TransitionRejected(action, phase)
        logger.debug(f"Ignoring {action} while {phase.value}")
        return self.snapshot()

    def _log_action(
        self,
        action: str,
        phase_before: Phase,
        outcome: str,
        *,
        detail: str | None = None,
        duration: float = 0.0,
    ) -> None:
        if self._session_logger is None:
            return
        self._session_logger.log_action(
            action,
            phase_before,
            self.phase,
            outcome,
            identity=self._draft,
            detail=detail,
            duration_seconds=duration,
        )
