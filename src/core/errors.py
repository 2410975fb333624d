"""UserDB exception hierarchy.

This module defines traceable domain errors with clear boundaries.
Each pipeline stage raises a specific error type for debuggability.
"""

from __future__ import annotations


class UserDBError(Exception):
    """Base exception for all UserDB failures."""


class UserDBConfigError(UserDBError):
    """Raised for invalid runtime configuration."""


class UserDBFetchError(UserDBError):
    """Raised for transport failures and non-200 registry responses."""


class UserDBContentError(UserDBError):
    """Raised when a registry feed fails its size sanity check."""


class UserDBDiscoveryError(UserDBError):
    """Raised when the special-registry directory cannot be resolved."""


class UserDBKeyError(UserDBError):
    """Raised for missing or unparseable radio ids during merge."""


class UserDBCancelledError(UserDBError):
    """Raised when the progress observer aborts a run."""


class UserDBOutputError(UserDBError):
    """Raised when a user file cannot be written."""
