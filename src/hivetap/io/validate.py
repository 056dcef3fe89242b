"""
Schema validation utilities for hivetap.io.

Purpose
- Validate Polars DataFrames against a TableDescriptor before they are written as a
  Hive text table.

Checks performed
- Every declared column (data fields and partition keys) is present.
- When strict=True: no columns outside the declared set.
- Non-Utf8 columns are cast to Utf8; Hive types are metadata only, so values pass
  through as strings.

Notes
- Output columns follow the descriptor's ``column_names`` order.
- Use ``TableDescriptor.to_scheme().sink(df)`` afterwards to drop partition keys
  before writing rows.
"""

from __future__ import annotations

from collections.abc import Iterable

import polars as pl

from hivetap.core.descriptor import TableDescriptor

from .config import HiveSettings
from .errors import IoSchemaError


def _ensure_columns_present(df: pl.DataFrame, needed: Iterable[str]) -> None:
    missing = [c for c in needed if c not in df.columns]
    if missing:
        raise IoSchemaError(f"missing required columns: {missing!r}")


def _ensure_no_extra_columns(df: pl.DataFrame, allowed: set[str]) -> None:
    extras = [c for c in df.columns if c not in allowed]
    if extras:
        raise IoSchemaError(f"unexpected columns present: {extras!r} (allowed={sorted(allowed)!r})")


def validate_frame_against_descriptor(
    df: pl.DataFrame,
    desc: TableDescriptor,
    *,
    strict: bool = True,
) -> pl.DataFrame:
    """
    Validate a Polars DataFrame against a TableDescriptor.

    Args:
        df (pl.DataFrame): Frame to validate.
        desc (TableDescriptor): Descriptor declaring the table's columns.
        strict (bool): Reject columns the descriptor does not declare when True.

    Returns:
        pl.DataFrame: Declared columns in ``column_names`` order, all Utf8. Under
        non-strict mode undeclared columns are dropped.

    Raises:
        IoSchemaError: If declared columns are missing, extras are present under strict
            mode, or a column cannot be cast to Utf8 (e.g. nested types).
    """
    declared = list(dict.fromkeys(desc.column_names))
    _ensure_columns_present(df, declared)
    if strict:
        _ensure_no_extra_columns(df, set(declared))

    exprs = []
    for col in declared:
        if df.schema[col] == pl.Utf8:
            exprs.append(pl.col(col))
        else:
            exprs.append(pl.col(col).cast(pl.Utf8))
    try:
        return df.select(exprs)
    except pl.exceptions.PolarsError as exc:
        raise IoSchemaError(f"failed to cast columns of table {desc.table_name!r} to Utf8: {exc}") from exc


def validate_frame(df: pl.DataFrame, desc: TableDescriptor, settings: HiveSettings) -> pl.DataFrame:
    """
    Validate ``df`` against ``desc`` using ``settings.strict_schema``.

    Raises:
        IoSchemaError: On validation failure.
    """
    return validate_frame_against_descriptor(df, desc, strict=settings.strict_schema)
