"""BizBuzz: reputation snapshot for a single local business."""

from bizbuzz.config import BizBuzzConfig, create_from_config, load_config
from bizbuzz.controller import BusinessController
from bizbuzz.data import (
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
from bizbuzz.errors import BizBuzzError, NetworkError, TransitionRejected, ValidationError
from bizbuzz.gateway import BusinessGateway, SimulatedGateway
from bizbuzz.generator import (
    BusinessDataGenerator,
    DataGenerator,
    generate_headline,
    generate_record,
)
from bizbuzz.session_log import SessionLogger
from bizbuzz.validation import validate, validate_identity

__all__ = [
    # Models
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
    # Errors
    "BizBuzzError",
    "NetworkError",
    "TransitionRejected",
    "ValidationError",
    # Functions
    "generate_headline",
    "generate_record",
    "validate",
    "validate_identity",
    # Protocols
    "BusinessGateway",
    "DataGenerator",
    # Implementations
    "BusinessController",
    "BusinessDataGenerator",
    "SimulatedGateway",
    # Logging
    "SessionLogger",
    # Config
    "BizBuzzConfig",
    "create_from_config",
    "load_config",
]
