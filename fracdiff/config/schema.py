"""
fracdiff Filter Config Schema

One validated parameter set for fractional differencing.

Usage:
    config = FilterConfig(d=0.4, threshold=1e-4)
    ffd = FractionalFilter.from_config(config)

    undo = config.inverse()   # d=-0.4, same truncation controls
    print(config.summary())
"""

from pydantic import BaseModel, Field


class FilterConfig(BaseModel):
    """
    Fractional filter parameters.

    threshold and max_count are truncation controls; 0 disables each.
    """

    # ==========================================================================
    # ORDER
    # ==========================================================================

    d: float = Field(
        ...,
        allow_inf_nan=False,
        description="Differencing order. 1 = first difference, -1 = running sum, "
                    "negative values invert the matching positive order."
    )

    # ==========================================================================
    # TRUNCATION
    # ==========================================================================

    threshold: float = Field(
        default=0.0,
        ge=0,
        allow_inf_nan=False,
        description="Stop generating weights once |w| <= threshold. 0 = never."
    )
    max_count: int = Field(
        default=0,
        ge=0,
        description="Maximum number of weights. 0 = bounded only by series length."
    )

    # ==========================================================================
    # METHODS
    # ==========================================================================

    @property
    def truncates(self) -> bool:
        """True if weights may be cut short (round trip no longer exact)"""
        return self.threshold > 0 or self.max_count > 0

    def inverse(self) -> "FilterConfig":
        """Config for the inverse transform"""
        return self.model_copy(update={"d": -self.d})

    def summary(self) -> str:
        """Human-readable summary"""
        lines = [
            "FilterConfig Summary",
            "=" * 40,
            f"Order d: {self.d:g}",
            f"Threshold: {self.threshold:g}" + (" (disabled)" if self.threshold == 0 else ""),
            f"Max count: {self.max_count}" + (" (disabled)" if self.max_count == 0 else ""),
            f"Exactly invertible: {'no' if self.truncates else 'yes'}",
        ]
        return "\n".join(lines)
