"""
Services module containing the registry and report generation.
"""

from .registry import Registry
from . import reports

__all__ = [
    "Registry",
    "reports",
]
