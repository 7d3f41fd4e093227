"""Core data models for BizBuzz."""

import dataclasses
from dataclasses import dataclass, field
from enum import StrEnum


class Phase(StrEnum):
    """Discrete phase of the application state machine."""

    UNSET = "unset"
    SUBMITTING = "submitting"
    LOADED = "loaded"
    REGENERATING = "regenerating"


class NoticeLevel(StrEnum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True)
class BusinessIdentity:
    """The (name, location) pair that keys a business lookup.

    Values are kept exactly as entered. Trimming only matters for
    validation, never for what gets sent to the gateway.
    """

    name: str = ""
    location: str = ""


@dataclass(frozen=True)
class GeneratedMetrics:
    """Generated part of a business record (everything but the identity)."""

    rating: float
    reviews: int
    headline: str


@dataclass(frozen=True)
class BusinessRecord:
    """A fully fetched business record."""

    name: str
    location: str
    rating: float
    reviews: int
    headline: str

    @classmethod
    def from_metrics(cls, identity: BusinessIdentity, metrics: GeneratedMetrics) -> "BusinessRecord":
        return cls(
            name=identity.name,
            location=identity.location,
            rating=metrics.rating,
            reviews=metrics.reviews,
            headline=metrics.headline,
        )

    @property
    def identity(self) -> BusinessIdentity:
        return BusinessIdentity(name=self.name, location=self.location)

    def with_headline(self, headline: str) -> "BusinessRecord":
        """Return a copy of this record with only the headline replaced."""
        return dataclasses.replace(self, headline=headline)


# -- State variants --
#
# The controller holds exactly one of these. Each carries only the data
# that is valid in its phase, so "regenerating without a record" cannot
# be built.


@dataclass(frozen=True)
class Unset:
    phase: Phase = field(default=Phase.UNSET, init=False)


@dataclass(frozen=True)
class Submitting:
    identity: BusinessIdentity
    phase: Phase = field(default=Phase.SUBMITTING, init=False)


@dataclass(frozen=True)
class Loaded:
    record: BusinessRecord
    phase: Phase = field(default=Phase.LOADED, init=False)


@dataclass(frozen=True)
class Regenerating:
    record: BusinessRecord
    phase: Phase = field(default=Phase.REGENERATING, init=False)


AppState = Unset | Submitting | Loaded | Regenerating


@dataclass(frozen=True)
class Notice:
    """A transient message for the user (toast)."""

    level: NoticeLevel
    title: str
    message: str


@dataclass(frozen=True)
class ViewState:
    """Observable snapshot handed to the presentation layer.

    ``record`` is only set once a fetch has fully succeeded. ``draft`` holds
    the current form values and survives failed submissions.
    """

    phase: Phase
    record: BusinessRecord | None = None
    field_errors: dict[str, str] = field(default_factory=dict)
    draft: BusinessIdentity = field(default_factory=BusinessIdentity)

    @property
    def is_loading(self) -> bool:
        return self.phase is Phase.SUBMITTING

    @property
    def is_regenerating(self) -> bool:
        return self.phase is Phase.REGENERATING

    @property
    def can_submit(self) -> bool:
        return self.phase is Phase.UNSET

    @property
    def can_regenerate(self) -> bool:
        return self.phase is Phase.LOADED

    @property
    def can_reset(self) -> bool:
        return self.phase is Phase.LOADED
