"""Utility helpers for deptree."""

from .console import _rich_echo, _rich_error, _rich_info, _rich_success, _rich_warning

__all__ = [
    '_rich_echo',
    '_rich_error',
    '_rich_info',
    '_rich_success',
    '_rich_warning',
]
