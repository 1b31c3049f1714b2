"""
fracdiff - Fractional Differencing and Integration of Time Series

Fractional differencing makes a series (close to) stationary while keeping
more of its long memory than ordinary differencing. Every function takes
array-likes and returns new numpy arrays. No file I/O - just math.

Series are ordered most recent first: index 0 is the latest observation.

Usage:
    import fracdiff

    # Weights of (1 - B)^d
    w = fracdiff.generate_weights(0.5, length=10)
    total = fracdiff.weight_sum(0.5, length=10)

    # Difference, then integrate back
    fd = fracdiff.fractional_filter(series, d=0.5)
    restored = fracdiff.fractional_integrate(fd, d=0.5)

    # Truncated weights, reused across many series
    ffd = fracdiff.FractionalFilter(d=0.4, threshold=1e-4, max_count=100)
    outputs = [ffd.apply(s) for s in many_series]

    # polars columns stored oldest row first
    df = fracdiff.fracdiff_columns(df, ['close'], fracdiff.FilterConfig(d=0.4))
"""

# Weight generation
from .weights import (
    generate_weights,
    weight_sum,
)

# Filtering
from .filtering import (
    apply_weights,
    fractional_filter,
    fractional_integrate,
    FractionalFilter,
)

# Configuration
from .config.schema import FilterConfig

# DataFrame adapter
from .frame import fracdiff_columns

__version__ = "1.0.0"
__license__ = "MIT"

__all__ = [
    # Weights
    'generate_weights', 'weight_sum',

    # Filtering
    'apply_weights', 'fractional_filter', 'fractional_integrate',
    'FractionalFilter',

    # Config
    'FilterConfig',

    # Frames
    'fracdiff_columns',
]
