# flake8: noqa
from .interface import Interface, ElementTypeMismatch
from .checks import (
    element_checks_enabled,
    pause_element_checks,
    continue_element_checks,
    stop_element_checks,
    no_element_checks,
)
from .construct import (
    StorageType,
    VariantMismatch,
    UnsupportedVariant,
    register_storage,
    get_storage,
    new_set,
)
from .algebra import union, intersection, difference, symmetric_difference
from .variants import MapSet, StringSet, IntSet, SequenceSet, StringListSet
from importlib.metadata import metadata

meta = metadata("setalgebra")
__version__ = meta["Version"]
__author__ = meta.get("Author", "")
__license__ = meta["License"]
__email__ = meta["Author-email"]
__program_name__ = meta["Name"]


__all__ = [
    "Interface",
    "ElementTypeMismatch",
    "element_checks_enabled",
    "pause_element_checks",
    "continue_element_checks",
    "stop_element_checks",
    "no_element_checks",
    "StorageType",
    "VariantMismatch",
    "UnsupportedVariant",
    "register_storage",
    "get_storage",
    "new_set",
    "union",
    "intersection",
    "difference",
    "symmetric_difference",
    "MapSet",
    "StringSet",
    "IntSet",
    "SequenceSet",
    "StringListSet",
]
