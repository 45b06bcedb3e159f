# =============================================================================
# app/routers/ - API Route Definitions
# =============================================================================
# This package contains FastAPI routers organized by resource:
# - health.py: Health check endpoints
# - avatars.py: Photo avatar rename/delete
# - voices.py: Cloned voice update/delete
# - videos.py: Video drafts, jobs and library listing
# - media.py: Editor media upload/delete
#
# Each router is mounted in main.py with a URL prefix.
#
# Routes that reach the database, storage or a vendor are plain `def`: the
# clients are synchronous, so FastAPI must run them in its threadpool.
# =============================================================================

from . import avatars
from . import health
from . import media
from . import videos
from . import voices

__all__ = [
    "avatars",
    "health",
    "media",
    "videos",
    "voices",
]
