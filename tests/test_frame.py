"""
Tests for applying fractional filters to polars DataFrame columns.
"""

import numpy as np
import polars as pl
import pytest

from fracdiff.config import FilterConfig
from fracdiff.filtering import fractional_filter
from fracdiff.frame import fracdiff_columns


# ─────────────────────────────────────────────────────────────────────
# Fixtures: synthetic price frame, oldest row first
# ─────────────────────────────────────────────────────────────────────

def _make_prices():
    return pl.DataFrame({
        'cycle': list(range(10)),
        'close': [5.0, 2.0, 2.0, -1.0, 0.0, 6.0, 5.0, 3.0, 1.0, 2.0],
        'volume': [10, 12, 9, 11, 15, 14, 13, 12, 16, 18],
    })


# ─────────────────────────────────────────────────────────────────────
# Tests
# ─────────────────────────────────────────────────────────────────────

class TestFracdiffColumns:

    def test_chronological_first_difference(self):
        out = fracdiff_columns(_make_prices(), 'close', FilterConfig(d=1))
        # Each row minus the previous one, first (oldest) row passed through
        assert out['close_fd'].to_list() == [5.0, -3.0, 0.0, -3.0, 1.0, 6.0, -1.0, -2.0, -2.0, 1.0]

    def test_reverse_ordered_frame(self):
        df = _make_prices().reverse()
        out = fracdiff_columns(df, 'close', FilterConfig(d=0.4), chronological=False)
        expected = fractional_filter(df['close'].to_numpy(), 0.4)
        np.testing.assert_allclose(out['close_fd'].to_numpy(), expected)

    def test_multiple_columns(self):
        out = fracdiff_columns(_make_prices(), ['close', 'volume'], FilterConfig(d=0.5))
        assert 'close_fd' in out.columns
        assert 'volume_fd' in out.columns
        assert out['volume_fd'].dtype == pl.Float64
        assert len(out) == 10

    def test_round_trip(self):
        df = _make_prices()
        config = FilterConfig(d=0.5)
        fd = fracdiff_columns(df, 'close', config)
        back = fracdiff_columns(fd, 'close_fd', config.inverse(), suffix='_fi')
        np.testing.assert_allclose(back['close_fd_fi'].to_numpy(), df['close'].to_numpy(), atol=1e-10)

    def test_input_unchanged(self):
        df = _make_prices()
        fracdiff_columns(df, 'close', FilterConfig(d=0.5))
        assert df.columns == ['cycle', 'close', 'volume']

    def test_custom_suffix(self):
        out = fracdiff_columns(_make_prices(), 'close', FilterConfig(d=0.5), suffix='_d05')
        assert 'close_d05' in out.columns

    def test_missing_column(self):
        with pytest.raises(KeyError):
            fracdiff_columns(_make_prices(), 'open', FilterConfig(d=0.5))

    def test_nulls_rejected(self):
        df = pl.DataFrame({'close': [1.0, None, 3.0]})
        with pytest.raises(ValueError):
            fracdiff_columns(df, 'close', FilterConfig(d=0.5))
