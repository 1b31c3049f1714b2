"""
fracdiff DataFrame Adapter

Apply a fractional filter to columns of a polars DataFrame.

DataFrames are usually stored oldest row first, the opposite of the
most-recent-first order the filter works in. With chronological=True each
column is reversed before filtering and the result reversed back, so every
row is differenced against its own history.

Usage:
    from fracdiff.frame import fracdiff_columns
    from fracdiff.config import FilterConfig

    df = fracdiff_columns(prices, ['close', 'volume'], FilterConfig(d=0.4))
    # adds close_fd, volume_fd
"""

import logging
from typing import List, Union

import numpy as np
import polars as pl

from .config.schema import FilterConfig
from .filtering import FractionalFilter

logger = logging.getLogger(__name__)


def fracdiff_columns(
    df: pl.DataFrame,
    columns: Union[str, List[str]],
    config: FilterConfig,
    chronological: bool = True,
    suffix: str = '_fd',
) -> pl.DataFrame:
    """
    Append fractionally filtered copies of columns to a DataFrame.

    Args:
        df: Input DataFrame (not modified)
        columns: Column name or list of column names to filter
        config: Filter parameters
        chronological: True if rows are ordered oldest first
        suffix: Appended to each column name for the output column

    Returns:
        New DataFrame with one Float64 column '<column><suffix>' per input column

    Raises:
        KeyError: If a column is missing
        ValueError: If a column contains nulls
    """
    if isinstance(columns, str):
        columns = [columns]

    ffd = FractionalFilter.from_config(config)
    new_cols = []

    for col in columns:
        if col not in df.columns:
            raise KeyError(f"Column not found: {col}")

        series = df[col]
        if series.null_count() > 0:
            raise ValueError(f"Column {col} has {series.null_count()} null values")

        values = series.cast(pl.Float64).to_numpy()
        if chronological:
            values = values[::-1]

        result = ffd.apply(values)
        if chronological:
            result = result[::-1]

        new_cols.append(pl.Series(f"{col}{suffix}", np.ascontiguousarray(result), dtype=pl.Float64))
        logger.debug("filtered column %s (n=%d, d=%g)", col, len(values), config.d)

    return df.with_columns(new_cols)
