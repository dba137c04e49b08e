"""
Engine error kinds.

Every caller-visible failure derives from EngineError (a ValueError), so callers
can catch the whole family or a single kind.
"""

from __future__ import annotations


class EngineError(ValueError):
    """Base class for invalid inputs the engine refuses to compute on."""


class UnknownRegionError(EngineError):
    """Province / state code is not in the tabulated enumeration."""


class UnsupportedYearError(EngineError):
    """No bracket tables exist for the requested tax year."""


class BracketTableError(EngineError):
    """A bracket table violates the contiguity / rate invariants."""
