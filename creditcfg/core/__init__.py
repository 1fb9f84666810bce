"""Core module - models, constants and exceptions."""

from .constants import Network, NOT_DEPLOYED, PERCENTAGE_FACTOR
from .exceptions import CreditConfigError, UnknownSymbolError, ConfigValidationError, TemplateError

__all__ = [
    "Network",
    "NOT_DEPLOYED",
    "PERCENTAGE_FACTOR",
    "CreditConfigError",
    "UnknownSymbolError",
    "ConfigValidationError",
    "TemplateError",
]
