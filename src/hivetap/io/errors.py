"""
Custom exceptions for the hivetap.io module.

Purpose
- Provide IO-layer error types distinct from the core descriptor errors.
- Keep hivetap.core.errors as the source of truth for descriptor validation
  (InvalidConfiguration, UnsupportedOperation).

Boundaries
- hivetap.io raises Io* errors for settings and frame concerns:
  - IoConfigError: invalid settings values or unreadable config files.
  - IoSchemaError: a polars DataFrame does not match a TableDescriptor.

Notes
- These exceptions do not perform any IO and are stdlib-only.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for IO-related errors in hivetap.io.

    Notes:
        Use this as a catch-all for IO-layer failures, distinct from hivetap.core errors.
    """


class IoConfigError(IoError):
    """
    Raised when IO configuration is invalid.

    Examples:
        - Empty warehouse_dir
        - Malformed hivetap.toml
    """


class IoSchemaError(IoError):
    """
    Raised when a DataFrame fails validation against a TableDescriptor.

    Notes:
        Frames must carry the descriptor's data fields and partition keys; all values
        are treated as strings.
    """
