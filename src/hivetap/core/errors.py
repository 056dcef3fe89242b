"""
Core exception types raised by descriptor validation and translation.

Provides typed exceptions for core-domain failures:
- InvalidConfiguration for descriptor arguments that violate table invariants
  (empty table name, mismatched columns/types, unknown partition keys) and for
  malformed partition values or paths.
- UnsupportedOperation for requests a descriptor cannot honor, such as asking an
  unpartitioned table for its partition descriptor.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - Both errors are raised synchronously and are not retryable; callers fix their
      inputs and build a new descriptor.

Examples:
    Catch a bad descriptor.

    >>> from hivetap.core.descriptor import TableDescriptor
    >>> from hivetap.core.errors import InvalidConfiguration
    >>> try:
    ...     TableDescriptor("t", [], [])
    ... except InvalidConfiguration as e:
    ...     msg = str(e)
    >>> "column_names" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "InvalidConfiguration",
    "UnsupportedOperation",
]


class InvalidConfiguration(ValueError):
    """Descriptor or partition arguments violate a table invariant."""


class UnsupportedOperation(RuntimeError):
    """Operation is not available for this descriptor (e.g., partitions on an unpartitioned table)."""
