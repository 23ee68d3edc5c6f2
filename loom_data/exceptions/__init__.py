"""Offer Exception handling tools for loom-data models."""

from .error import (
    ConfigError,
    ConfigValidationError,
    InvalidParameterError,
    MissingPropertyError,
    ModelError,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "InvalidParameterError",
    "MissingPropertyError",
    "ModelError",
]
