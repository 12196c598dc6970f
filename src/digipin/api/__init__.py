"""
DIGIPIN API - Grid Logic Layer

This package contains the codec and everything built on it, separated from
CLI presentation concerns:
- core: Constants, value types and exceptions
- codec: Encode/decode and code formatting
- hierarchy: Parent, children, siblings and neighbors
- grid: Bounded grid enumeration and its variants
- distance: Great-circle distance and bearing
- batch: Thread-pooled batch encode/decode/validate
"""

# Activate deal contracts for runtime validation
import deal


deal.activate()

__all__ = [
    # Import directly from the submodules:
    # from digipin.api.codec import ...
    # from digipin.api.hierarchy import ...
]
