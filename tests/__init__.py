# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for arraykit:
# - test_helpers.py: Classification, coercion and equality helpers
# - test_ranges.py / test_transform.py / test_aggregate.py /
#   test_sequence.py / test_reduce.py: One module per handler group
# - test_registry.py / test_engine.py: Registration and dispatch
# - test_config.py: Settings and exceptions
#
# Run tests with: pytest
# =============================================================================
