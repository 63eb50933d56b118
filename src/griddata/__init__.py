# src/griddata/__init__.py
from .builder import GridBuilder
from .context import GridContext
from .converters import ConverterCollection, ConverterDefinition, GridConverter, GridConverterBase
from .core import GridComponent, GridControlValueBase, GridEditorConfigBase
from .exceptions import ConverterRegistrationError, GridDataError, GridParseError
from .models import GridArea, GridControl, GridDataModel, GridEditor, GridRow, GridSection
from .search import SearchTextVisitor, SearchTextWriter
from .wrapper import GridControlWrapper

__all__ = [
    "GridBuilder",
    "GridContext",
    "ConverterCollection",
    "ConverterDefinition",
    "GridConverter",
    "GridConverterBase",
    "GridComponent",
    "GridControlValueBase",
    "GridEditorConfigBase",
    "ConverterRegistrationError",
    "GridDataError",
    "GridParseError",
    "GridArea",
    "GridControl",
    "GridDataModel",
    "GridEditor",
    "GridRow",
    "GridSection",
    "SearchTextVisitor",
    "SearchTextWriter",
    "GridControlWrapper",
]
