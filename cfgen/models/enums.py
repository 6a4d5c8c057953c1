"""Domain enums used across schemas and encoders.

All enums use str mixin for JSON serialization.
"""

from __future__ import annotations

from enum import Enum


class Sex(str, Enum):
    """Sex marker as encoded in the day block (female adds 40)."""

    MALE = "M"
    FEMALE = "F"
