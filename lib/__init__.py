# =============================================================================
# lib/ - Standalone Building Blocks
# =============================================================================
# This package contains the pieces every operation is assembled from:
# - result.py: Success/Failure envelope
# - clients.py: Lazily built external clients (Supabase, S3, httpx)
# - events.py: Structured operation events on top of logging
# - operation.py: Boundary decorator that turns exceptions into failures
# - filters.py: Query filters and identifier precedence
# - database.py: uid-scoped Supabase table gateway
# - storage.py: Media object storage gateway
# - vendors.py: HeyGen and voice webhook clients
# - utils.py: Input normalization helpers
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.clients import ServiceContext
from lib.events import LoggingEvents, OperationEvents
from lib.filters import Filter, first_candidate
from lib.operation import operation
from lib.result import Failure, Result, Success, fail, ok
from lib.utils import clean_text, require_text

__all__ = [
    # Clients
    "ServiceContext",
    # Events
    "LoggingEvents",
    "OperationEvents",
    # Filters
    "Filter",
    "first_candidate",
    # Boundary
    "operation",
    # Results
    "Failure",
    "Result",
    "Success",
    "fail",
    "ok",
    # Utils
    "clean_text",
    "require_text",
]
