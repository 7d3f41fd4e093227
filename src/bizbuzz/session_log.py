"""Session logger for recording controller actions to JSON files."""

import dataclasses
import uuid
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from pydantic import BaseModel

from bizbuzz.data import Phase


class ActionRecord(BaseModel):
    """Record of a single controller action."""

    action: str
    phase_before: str
    phase_after: str
    outcome: str
    identity: dict[str, Any] | None = None
    detail: str | None = None
    timestamp: str = ""
    duration_seconds: float = 0.0


class SessionRecord(BaseModel):
    """Record of one controller session."""

    session_id: str
    started_at: str
    completed_at: str | None = None
    actions: list[ActionRecord] = []


def _serialize(obj: Any) -> Any:
    """Serialize an object to JSON-compatible format.

    Handles dataclasses, Pydantic models, enums, lists, dicts, and primitives.
    """
    if obj is None:
        return None
    if isinstance(obj, Phase):
        return obj.value
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return dataclasses.asdict(obj)
    if isinstance(obj, BaseModel):
        return obj.model_dump()
    if isinstance(obj, list):
        return [_serialize(item) for item in obj]
    if isinstance(obj, dict):
        return {k: _serialize(v) for k, v in obj.items()}
    if isinstance(obj, Path):
        return str(obj)
    return obj


class SessionLogger:
    """Accumulates action records and writes one JSON log file per session.

    When ``enabled=False``, all methods are no-ops.

    Args:
        log_dir: Directory to write JSON log files.
        enabled: If False, all methods become no-ops.
    """

    def __init__(self, log_dir: Path, *, enabled: bool = True) -> None:
        self._log_dir = log_dir
        self._enabled = enabled
        self._record: SessionRecord | None = None
        self._last_log_path: Path | None = None

    @property
    def enabled(self) -> bool:
        """Whether logging is active."""
        return self._enabled

    @property
    def last_log_path(self) -> Path | None:
        """Path to the last written log file, or None."""
        return self._last_log_path

    def start_session(self) -> None:
        if not self._enabled:
            return

        self._record = SessionRecord(
            session_id=str(uuid.uuid4()),
            started_at=datetime.now(tz=UTC).isoformat(),
        )

    def log_action(
        self,
        action: str,
        phase_before: Phase,
        phase_after: Phase,
        outcome: str,
        *,
        identity: Any = None,
        detail: str | None = None,
        duration_seconds: float = 0.0,
    ) -> None:
        """Append an action record, starting a session if none is open.

        Args:
            action: Controller action name (e.g. "submit_identity").
            phase_before: Phase when the action was triggered.
            phase_after: Phase once the action settled.
            outcome: One of "ok", "invalid", "failed", "rejected".
            identity: Identity the action concerned (will be serialized).
            detail: Optional message, e.g. the failure text.
            duration_seconds: Wall-clock time the action took.
        """
        if not self._enabled:
            return
        if self._record is None:
            self.start_session()
        assert self._record is not None

        self._record.actions.append(
            ActionRecord(
                action=action,
                phase_before=_serialize(phase_before),
                phase_after=_serialize(phase_after),
                outcome=outcome,
                identity=_serialize(identity),
                detail=detail,
                timestamp=datetime.now(tz=UTC).isoformat(),
                duration_seconds=round(duration_seconds, 4),
            )
        )

    def finish_session(self) -> Path | None:
        """Write the session record to a JSON file.

        Returns:
            Path to the written file, or None if disabled or no session is open.
        """
        if not self._enabled or self._record is None:
            return None

        self._record.completed_at = datetime.now(tz=UTC).isoformat()

        self._log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now(tz=UTC).strftime("%Y%m%d_%H%M%S")
        short_id = self._record.session_id[:8]
        path = self._log_dir / f"session_{timestamp}_{short_id}.json"

        path.write_text(self._record.model_dump_json(indent=2))
        self._last_log_path = path
        self._record = None
        return path
