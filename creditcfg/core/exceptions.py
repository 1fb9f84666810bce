"""Custom exceptions for creditcfg."""

from typing import List, Optional


class CreditConfigError(Exception):
    """Base exception for all creditcfg errors."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.message = message
        self.code = code
        super().__init__(self.message)


class UnknownSymbolError(CreditConfigError):
    """Raised when a token, contract or market id is not in its table."""

    def __init__(self, kind: str, symbol: str):
        self.kind = kind
        self.symbol = symbol
        super().__init__(f"Unknown {kind}: {symbol}", code="unknown_symbol")


class ConfigValidationError(CreditConfigError):
    """Raised when a market configuration is malformed."""

    def __init__(self, config_id: str, problems: List[str]):
        self.config_id = config_id
        self.problems = list(problems)
        lines = "\n".join(f"  - {p}" for p in self.problems)
        super().__init__(f"Invalid configuration {config_id}:\n{lines}", code="invalid_config")


class TemplateError(CreditConfigError):
    """Raised when a fixture template cannot be read."""

    def __init__(self, path, cause: Optional[OSError] = None):
        self.path = path
        self.cause = cause
        detail = f": {cause}" if cause else ""
        super().__init__(f"Cannot read template {path}{detail}", code="template")
