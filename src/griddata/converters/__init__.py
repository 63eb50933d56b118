# src/griddata/converters/__init__.py
from .base import ConverterDefinition, GridConverterBase
from .collection import WILDCARD, ConverterCollection
from .default import GridConverter

__all__ = [
    "ConverterDefinition",
    "GridConverterBase",
    "ConverterCollection",
    "GridConverter",
    "WILDCARD",
]
