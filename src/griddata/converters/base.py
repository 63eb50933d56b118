# src/griddata/converters/base.py
from typing import Any, Iterable, Optional, Tuple, Type, TYPE_CHECKING

from ..core import GridControlValueBase, GridEditorConfigBase

if TYPE_CHECKING:
    from ..models import GridControl, GridEditor
    from ..wrapper import GridControlWrapper


class GridConverterBase:
    """
    Base class for converters turning raw grid JSON into typed values and configs.

    Every hook returns None by default, meaning "not handled here", so a
    subclass only overrides the hooks it supports. A hook must never raise for
    input it does not understand; it returns None and the ConverterCollection
    moves on to the next converter.
    """

    def get_value_type(self, control: "GridControl") -> Optional[Type[GridControlValueBase]]:
        """Returns the value type this converter produces for `control`, if any."""
        return None

    def get_config_type(self, editor: "GridEditor") -> Optional[Type[GridEditorConfigBase]]:
        """Returns the config type this converter produces for `editor`, if any."""
        return None

    def convert_control_value(self, control: "GridControl", token: Any) -> Optional[GridControlValueBase]:
        """
        Converts the raw value `token` of `control`.

        Args:
            control: The control being resolved. Its editor is already resolved.
            token: The JSON value of the control, of editor-defined shape.

        Returns:
            The converted value, or None if this converter does not handle it.
        """
        return None

    def convert_editor_config(self, editor: "GridEditor", token: Any) -> Optional[GridEditorConfigBase]:
        """Converts the raw config `token` of `editor`, or returns None."""
        return None

    def get_control_wrapper(self, control: "GridControl") -> Optional["GridControlWrapper"]:
        """Returns a typed wrapper for `control`, or None."""
        return None

    @staticmethod
    def contains_ignore_case(source: Optional[str], value: Optional[str]) -> bool:
        if not source or not source.strip() or not value or not value.strip():
            return False
        return value.casefold() in source.casefold()

    @staticmethod
    def equals_ignore_case(source: Optional[str], value: Optional[str]) -> bool:
        if not source or not source.strip() or not value or not value.strip():
            return False
        return source.casefold() == value.casefold()

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


class ConverterDefinition:
    """
    Configuration object binding a converter to the editor aliases it is consulted for.
    The wildcard alias "*" consults the converter for every editor.
    """

    def __init__(self, converter: GridConverterBase, aliases: Optional[Iterable[str]] = None):
        self.converter = converter
        self.aliases: Tuple[str, ...] = tuple(aliases) if aliases else ("*",)

    def __repr__(self) -> str:
        return f"<ConverterDefinition {self.converter!r} aliases={list(self.aliases)}>"
