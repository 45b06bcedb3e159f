# =============================================================================
# tests/test_events.py - Operation Event Logging Tests
# =============================================================================

import logging
from unittest.mock import MagicMock

from app.exceptions import DatabaseError
from lib.events import LoggingEvents


class TestLoggingEvents:
    """Test LoggingEvents output and its never-raise guarantee."""

    def test_start_line_has_scope_and_fields(self, caplog):
        events = LoggingEvents()

        with caplog.at_level(logging.INFO, logger="studio.operations"):
            events.start("delete_voice", "Incoming request", uid="u-1", voice_id="v-1")

        assert "[ServerAction] delete_voice - Incoming request" in caplog.text
        assert "uid='u-1'" in caplog.text
        assert "voice_id='v-1'" in caplog.text

    def test_failure_includes_stage_and_message(self, caplog):
        events = LoggingEvents()
        error = DatabaseError("permission denied", stage="update voice record")

        with caplog.at_level(logging.ERROR, logger="studio.operations"):
            events.failure("update_voice", error, uid="u-1")

        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert "update voice record" in record.getMessage()
        assert "permission denied" in record.getMessage()

    def test_unexpected_exception_logs_traceback(self, caplog):
        events = LoggingEvents()

        with caplog.at_level(logging.ERROR, logger="studio.operations"):
            events.failure("list_videos", RuntimeError("boom"))

        assert caplog.records[-1].exc_info is not None

    def test_logging_failures_are_swallowed(self):
        """A broken logger must not break the operation."""
        logger = MagicMock()
        logger.log.side_effect = OSError("disk full")
        events = LoggingEvents(logger)

        events.start("create_video", "Incoming request", uid="u-1")
        events.success("create_video", "Completed")
        events.failure("create_video", "bad")

        assert logger.log.call_count == 3

    def test_unprintable_error_is_swallowed(self):
        """Describing an error whose text can't be produced must not raise."""

        class Unprintable(Exception):
            def __str__(self):
                raise RuntimeError("no text")

        logger = MagicMock()
        events = LoggingEvents(logger)

        events.failure("create_video", Unprintable(), uid="u-1")

        logger.log.assert_not_called()
