"""Identifier helpers shared by every fixture block."""


def safe_enum(symbol: str) -> str:
    """Make a token symbol usable as an enum member.

    Symbols starting with a digit (``3Crv``) get a leading underscore.
    """
    if symbol[:1].isdigit():
        return f"_{symbol}"
    return symbol


def token_ref(symbol: str) -> str:
    return f"Tokens.{safe_enum(symbol)}"


def contract_ref(name: str) -> str:
    return f"Contracts.{name}"
