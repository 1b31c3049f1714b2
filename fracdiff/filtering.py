"""
fracdiff Fractional Filtering

Causal convolution of a series with fractional differencing weights.

Series are stored in reverse chronological order: index 0 is the most
recent observation, index N-1 the oldest. Output element i combines
series[i] with the older samples that follow it:

    out[i] = sum_{m=0}^{M-1} w[m] * series[i + m]     (terms with i + m >= N omitted)

so the last element always passes through unchanged (only w[0] = 1 applies),
and elements near the end of the series are built from fewer terms. The
inverse transform (order -d) runs out of data in exactly the same way, which
is why filtering with d and then -d reconstructs the original series.

Usage:
    from fracdiff.filtering import fractional_filter, FractionalFilter

    fd = fractional_filter(prices, d=0.4)
    restored = fractional_filter(fd, d=-0.4)

    # Reuse one weight sequence across many series
    ffd = FractionalFilter(d=0.4, threshold=1e-4)
    outputs = [ffd.apply(s) for s in many_series]
"""

import logging
from typing import Optional

import numpy as np

from .config.schema import FilterConfig
from .weights import generate_weights

logger = logging.getLogger(__name__)


def _as_series(series) -> np.ndarray:
    values = np.asarray(series, dtype=np.float64)
    if values.ndim == 0:
        raise ValueError("series must be 1D or 2D, got a scalar")
    if values.ndim > 2:
        raise ValueError(f"series must be 1D or 2D, got {values.ndim}D")
    return values


def apply_weights(series, weights: np.ndarray) -> np.ndarray:
    """
    Convolve a series with a precomputed weight sequence.

    Args:
        series: 1D array, or 2D array of column-wise series (axis 0 is time),
                most recent observation first
        weights: Weight sequence, weights[0] multiplies series[i] itself.
                 Weights beyond the series length are ignored.

    Returns:
        New float64 array with the same shape as series

    Raises:
        ValueError: If series is not 1D/2D or weights is not 1D
    """
    values = _as_series(series)
    weights = np.asarray(weights, dtype=np.float64)
    if weights.ndim != 1:
        raise ValueError(f"weights must be 1D, got {weights.ndim}D")
    n = values.shape[0]

    out = np.zeros_like(values)
    if n == 0 or len(weights) == 0:
        return out

    # Accumulate by increasing weight index; each term only touches the
    # output rows that still have a sample m steps older.
    for m in range(min(len(weights), n)):
        out[:n - m] += weights[m] * values[m:]

    return out


def fractional_filter(
    series,
    d: float,
    threshold: float = 0.0,
    max_count: int = 0,
) -> np.ndarray:
    """
    Fractionally difference (d > 0) or integrate (d < 0) a series.

    Args:
        series: Values ordered most recent first (1D, or 2D column-wise)
        d: Differencing order
        threshold: Weight magnitude cutoff, 0 uses all N weights
        max_count: Cap on the number of weights, 0 disables it

    Returns:
        New float64 array, same shape as series. The input is not modified.

    Notes:
        - d = 0 returns a copy of the series
        - d = 1 gives series[i] - series[i+1], last element passed through
        - d = -1 gives the suffix sums series[i] + ... + series[N-1]
        - Round trip with -d is exact up to rounding only when no
          truncation occurred (threshold = 0 and max_count = 0)
    """
    values = _as_series(series)
    weights = generate_weights(d, values.shape[0], threshold, max_count)

    logger.debug(
        "fractional_filter d=%g n=%d n_weights=%d", d, values.shape[0], len(weights)
    )

    return apply_weights(values, weights)


def fractional_integrate(
    series,
    d: float,
    threshold: float = 0.0,
    max_count: int = 0,
) -> np.ndarray:
    """Undo fractional_filter(series, d, ...) by filtering with -d."""
    return fractional_filter(series, -d, threshold, max_count)


class FractionalFilter:
    """
    Fractional filter bound to one (d, threshold, max_count) setting.

    The weights for a shorter series are a prefix of the weights for a
    longer one (the stopping rules do not depend on length), so only the
    longest sequence computed so far is kept and shorter lengths slice it.
    It is regenerated only when a longer series arrives and the cached
    sequence was cut by length rather than by threshold or max_count.
    The cache is private; weights() always returns a copy.

    Example:
        ffd = FractionalFilter(d=0.5)
        fd = ffd.apply(series)
        restored = ffd.inverse().apply(fd)
    """

    def __init__(
        self,
        d: float,
        threshold: float = 0.0,
        max_count: int = 0,
        config: Optional[FilterConfig] = None,
    ):
        self.config = config or FilterConfig(d=d, threshold=threshold, max_count=max_count)
        self._cache = np.empty(0, dtype=np.float64)
        # Length the cached sequence was generated for
        self._cache_length = 0

    @classmethod
    def from_config(cls, config: FilterConfig) -> "FractionalFilter":
        return cls(config.d, config.threshold, config.max_count, config=config)

    @property
    def d(self) -> float:
        return self.config.d

    @property
    def threshold(self) -> float:
        return self.config.threshold

    @property
    def max_count(self) -> int:
        return self.config.max_count

    def _weights(self, length: int) -> np.ndarray:
        length = max(int(length), 0)
        cut_by_length = len(self._cache) == self._cache_length
        if length > self._cache_length and cut_by_length:
            self._cache = generate_weights(self.d, length, self.threshold, self.max_count)
            self._cache_length = length
        return self._cache[:length]

    def weights(self, length: int) -> np.ndarray:
        """Weight sequence used for a series of the given length."""
        return self._weights(length).copy()

    def apply(self, series) -> np.ndarray:
        """Filter one series (or a 2D block of column-wise series)."""
        values = _as_series(series)
        return apply_weights(values, self._weights(values.shape[0]))

    def inverse(self) -> "FractionalFilter":
        """Filter with the negated order and the same truncation controls."""
        return FractionalFilter.from_config(self.config.inverse())

    def round_trip(self, series) -> np.ndarray:
        """Filter then inverse-filter; equals series up to rounding if untruncated."""
        return self.inverse().apply(self.apply(series))

    def __repr__(self) -> str:
        return (
            f"FractionalFilter(d={self.d}, threshold={self.threshold}, "
            f"max_count={self.max_count})"
        )
