"""
Contract Validation Module

Общие проверки предусловий для векторов, матриц и builder'ов.
"""

from .validators import (
    require_equal_shapes,
    require_equal_sizes,
    require_index_in_range,
    require_instance,
    require_not_none,
    require_positive_size,
)

__all__ = [
    "require_not_none",
    "require_instance",
    "require_positive_size",
    "require_equal_sizes",
    "require_equal_shapes",
    "require_index_in_range",
]
