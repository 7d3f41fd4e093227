"""Data models for BizBuzz."""

from bizbuzz.data.models import (
    AppState,
    BusinessIdentity,
    BusinessRecord,
    GeneratedMetrics,
    Loaded,
    Notice,
    NoticeLevel,
    Phase,
    Regenerating,
    Submitting,
    Unset,
    ViewState,
)

__all__ = [
    "AppState",
    "BusinessIdentity",
    "BusinessRecord",
    "GeneratedMetrics",
    "Loaded",
    "Notice",
    "NoticeLevel",
    "Phase",
    "Regenerating",
    "Submitting",
    "Unset",
    "ViewState",
]
