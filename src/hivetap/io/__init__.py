"""
hivetap.io — runtime settings and frame helpers around hivetap.core descriptors.

## Responsibilities
- HiveSettings — warehouse location, schema strictness and NULL marker, loaded with
  precedence env > TOML > defaults.
- Paths — resolve table and partition locations under the warehouse directory.
- Validate — check polars DataFrames against a TableDescriptor before they are handed
  to a writer.

## Import DAG discipline
- Depends only on stdlib, polars, and hivetap.core.*.
- Performs no data reads or writes; only config files are read by HiveSettings loaders.
"""

from __future__ import annotations

from .config import HiveSettings

__all__ = [
    "HiveSettings",
]
