"""
fracdiff Weight Generation

Binomial-series coefficients of (1 - B)^d, where B is the backshift operator.

Each coefficient is derived from the previous one:

    w[0] = 1
    w[k] = -w[k-1] * (d - k + 1) / k

so no factorials or gamma functions are ever evaluated.
"""

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


def _as_count(value, name: str) -> int:
    """Integer value of a count argument; integral floats are accepted."""
    if isinstance(value, (bool, np.bool_)):
        raise ValueError(f"{name} must be an integer, got {value!r}")
    if isinstance(value, (int, np.integer)):
        return int(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise ValueError(f"{name} must be an integer, got {value!r}")


def _check_controls(threshold: float, max_count: int) -> int:
    if not math.isfinite(threshold):
        raise ValueError(f"threshold must be finite, got {threshold}")
    if threshold < 0:
        raise ValueError(f"threshold must be >= 0, got {threshold}")
    max_count = _as_count(max_count, "max_count")
    if max_count < 0:
        raise ValueError(f"max_count must be >= 0, got {max_count}")
    return max_count


def generate_weights(
    d: float,
    length: int,
    threshold: float = 0.0,
    max_count: int = 0,
) -> np.ndarray:
    """
    Generate fractional differencing weights.

    Candidates are produced by the recurrence until one of these holds,
    checked in order for every candidate:
        1. threshold > 0 and |candidate| <= threshold (candidate dropped)
        2. max_count > 0 and the candidate index >= max_count (dropped)
        3. `length` weights have been produced

    Args:
        d: Differencing order. 1 = first difference, -1 = running sum,
           fractional values interpolate, negative values invert.
        length: Maximum number of weights (usually the series length).
                Zero or negative lengths give an empty array.
        threshold: Magnitude cutoff, 0 disables it
        max_count: Cap on the number of weights, 0 disables it

    Returns:
        1D float64 array, w[0] == 1.0, len(w) <= max(length, 0)

    Raises:
        ValueError: If d or threshold is not finite, threshold or max_count
                    is negative, or length or max_count is not an integer

    Notes:
        Large orders overflow float64 and the weights become +/-inf (numpy
        emits a RuntimeWarning, nothing is raised). For integer d the
        recurrence then multiplies inf by (d - k + 1) == 0 at k = d + 1,
        so every weight from there on is NaN rather than 0.

    Examples:
        >>> generate_weights(0.5, 4)
        array([ 1.    , -0.5   , -0.125 , -0.0625])

        >>> generate_weights(1, 5)
        array([ 1., -1.,  0.,  0.,  0.])

        >>> generate_weights(1, 5, threshold=1e-8)
        array([ 1., -1.])
    """
    if not math.isfinite(d):
        raise ValueError(f"d must be finite, got {d}")
    max_count = _check_controls(threshold, max_count)

    length = _as_count(length, "length")
    if length <= 0:
        return np.empty(0, dtype=np.float64)

    w = np.empty(length, dtype=np.float64)
    w[0] = 1.0
    count = 1
    debug = logger.isEnabledFor(logging.DEBUG)

    for k in range(1, length):
        candidate = -w[k - 1] * (d - k + 1) / k
        if debug:
            logger.debug("k=%d candidate=%.10g", k, candidate)

        if threshold > 0 and abs(candidate) <= threshold:
            if debug:
                logger.debug("stop at k=%d: |w| <= threshold %g", k, threshold)
            break
        if max_count > 0 and k >= max_count:
            if debug:
                logger.debug("stop at k=%d: max_count %d reached", k, max_count)
            break

        w[k] = candidate
        count += 1

    # Copy so the result does not keep the full-length buffer alive
    return w[:count].copy()


def weight_sum(
    d: float,
    length: int,
    threshold: float = 0.0,
    max_count: int = 0,
) -> float:
    """
    Sum of the generated weights.

    For 0 < d < 1 the partial sums shrink toward 0 as length grows,
    but any finite length leaves a small positive remainder.
    """
    return float(np.sum(generate_weights(d, length, threshold, max_count)))
