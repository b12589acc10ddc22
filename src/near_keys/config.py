"""
Global configuration for key handling.

This module contains environment-specific settings that apply across the package.
"""

import os

from .key_type import KeyType

_SUPPORTED_CURVES: list[str] = [key_type.tag for key_type in KeyType]

DEFAULT_CURVE = os.environ.get("NEAR_KEYS_DEFAULT_CURVE", "ed25519").lower()
"""Curve used when a random key pair is requested without naming one."""

if DEFAULT_CURVE not in _SUPPORTED_CURVES:
    raise ValueError(
        f"Invalid NEAR_KEYS_DEFAULT_CURVE environment variable: '{DEFAULT_CURVE}'. "
        f"Supported values: {_SUPPORTED_CURVES}"
    )
