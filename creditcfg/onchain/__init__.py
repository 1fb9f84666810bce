"""On-chain checks of the reference tables."""

from .decimals import DecimalsMismatch, DecimalsVerifier, verify_decimals

__all__ = ["DecimalsMismatch", "DecimalsVerifier", "verify_decimals"]
