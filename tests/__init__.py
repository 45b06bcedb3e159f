# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Avatar Studio API:
# - test_result.py: Envelope values and the operation boundary
# - test_config.py: Settings and the lazy client context
# - test_events.py: Structured operation events
# - test_filters.py: Query filters and identifier precedence
# - test_database.py: uid-scoped Supabase gateway
# - test_*_service.py: One module per service
# - test_api.py: HTTP routes
#
# Run tests with: pytest
# =============================================================================
