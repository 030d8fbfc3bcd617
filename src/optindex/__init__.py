"""
optindex – first-occurrence search that answers with an Option.

Import path convention::

    from optindex.search import find_first_index
    from optindex.kernel.types import Nothing, Option, Some
    from optindex.kernel.errors import ValueAbsentError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
