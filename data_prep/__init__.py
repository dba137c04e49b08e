"""
Data preparation: snapshot validation before projection.
"""

from .validators import ValidationResult, validate_state

__all__ = ["ValidationResult", "validate_state"]
