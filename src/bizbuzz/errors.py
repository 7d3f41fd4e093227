"""Exception types for BizBuzz."""

from bizbuzz.data import Phase


class BizBuzzError(Exception):
    """Base exception for all BizBuzz errors."""


class ValidationError(BizBuzzError):
    """Raised when a submitted identity fails field validation.

    Args:
        field_errors: Mapping of field name to user-facing message.
    """

    def __init__(self, field_errors: dict[str, str]) -> None:
        self.field_errors = dict(field_errors)
        fields = ", ".join(self.field_errors)
        super().__init__(f"Invalid business identity: {fields}")


class NetworkError(BizBuzzError):
    """A gateway call failed. Always transient; the caller may re-trigger it.

    Args:
        message: User-facing failure message.
        operation: Gateway operation that failed (e.g. "fetch_record").
    """

    def __init__(self, message: str, *, operation: str = "") -> None:
        self.operation = operation
        super().__init__(message)


class TransitionRejected(BizBuzzError):
    """An action was triggered from a phase that does not allow it."""

    def __init__(self, action: str, phase: Phase) -> None:
        self.action = action
        self.phase = phase
        super().__init__(f"Cannot {action} while {phase.value}")
