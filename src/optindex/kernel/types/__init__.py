"""Kernel value types — public re-export surface.

Modules:
  option.py — Some, Nothing, Option
"""

from optindex.kernel.types.option import Nothing, Option, OptionBase, Some, from_nullable

__all__ = [
    "Nothing",
    "Option",
    "OptionBase",
    "Some",
    "from_nullable",
]
