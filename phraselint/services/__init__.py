"""
Service layer modules for phraselint.
"""
from .collector import phraselint
from .inspector import inspect, inspect_missing_prop
from .utils import difference, group_by

__all__ = [
    "phraselint",
    "inspect",
    "inspect_missing_prop",
    "difference",
    "group_by",
]
