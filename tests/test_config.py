"""
Tests for the filter configuration schema.
"""

import math

import pytest
from pydantic import ValidationError

from fracdiff.config import FilterConfig


class TestFilterConfig:

    def test_defaults(self):
        config = FilterConfig(d=0.5)
        assert config.threshold == 0.0
        assert config.max_count == 0
        assert not config.truncates

    def test_d_required(self):
        with pytest.raises(ValidationError):
            FilterConfig()

    def test_integer_order_coerced(self):
        assert FilterConfig(d=1).d == 1.0

    @pytest.mark.parametrize('d', [math.nan, math.inf, -math.inf])
    def test_non_finite_order(self, d):
        with pytest.raises(ValidationError):
            FilterConfig(d=d)

    def test_negative_threshold(self):
        with pytest.raises(ValidationError):
            FilterConfig(d=0.5, threshold=-1e-5)

    def test_negative_max_count(self):
        with pytest.raises(ValidationError):
            FilterConfig(d=0.5, max_count=-3)

    def test_fractional_max_count(self):
        with pytest.raises(ValidationError):
            FilterConfig(d=0.5, max_count=2.5)

    @pytest.mark.parametrize('kwargs', [{'threshold': 1e-4}, {'max_count': 10}])
    def test_truncates(self, kwargs):
        assert FilterConfig(d=0.5, **kwargs).truncates

    def test_inverse(self):
        config = FilterConfig(d=0.3, threshold=1e-4, max_count=50)
        inv = config.inverse()
        assert inv.d == -0.3
        assert inv.threshold == 1e-4
        assert inv.max_count == 50
        assert config.d == 0.3

    def test_inverse_twice(self):
        config = FilterConfig(d=0.3)
        assert config.inverse().inverse() == config

    def test_summary(self):
        text = FilterConfig(d=0.5, max_count=12).summary()
        assert 'Order d: 0.5' in text
        assert 'Max count: 12' in text
        assert 'Exactly invertible: no' in text

    def test_round_trip_dict(self):
        config = FilterConfig(d=-0.25, threshold=1e-3)
        assert FilterConfig.model_validate(config.model_dump()) == config
