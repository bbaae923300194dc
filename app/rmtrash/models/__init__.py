"""Data models for rmtrash.

This package contains the removal configuration and permission check
result types.
"""

from rmtrash.models.check import Cleared, PermissionCheckResult, Skip
from rmtrash.models.config import InteractiveMode, TrashConfig

__all__ = [
    "Cleared",
    "InteractiveMode",
    "PermissionCheckResult",
    "Skip",
    "TrashConfig",
]
