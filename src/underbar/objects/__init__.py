"""Mapping merge helpers."""

from underbar.objects.merge import defaults, extend

__all__ = [
    "extend",
    "defaults",
]
