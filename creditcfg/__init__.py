"""Deployment configuration and fixture generation for credit pools."""

__version__ = "0.3.0"
