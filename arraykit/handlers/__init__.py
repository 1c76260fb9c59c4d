# =============================================================================
# arraykit/handlers - All Collection Handlers
# =============================================================================
# Handlers organized by category:
#   - ranges: range construction (numeric and alphabetic)
#   - transform: kind-preserving filter and map
#   - aggregate: sum, product, max, min
#   - sequence: in_array, unique, flatten, shuffle
#   - reduce: left and right folds
#
# Import all handler modules here to register them with the global registry.
# =============================================================================

from arraykit.handlers import ranges
from arraykit.handlers import transform
from arraykit.handlers import aggregate
from arraykit.handlers import sequence
from arraykit.handlers import reduce
