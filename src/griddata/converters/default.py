# src/griddata/converters/default.py
from typing import Any, Dict, NamedTuple, Optional, Type

from ..core import GridControlValueBase, GridEditorConfigBase
from ..values import (
    GridControlEmbedValue,
    GridControlMacroValue,
    GridControlMediaValue,
    GridControlRichTextValue,
    GridControlTextValue,
    GridEditorTextConfig,
)
from ..wrapper import GridControlWrapper
from .base import ConverterDefinition, GridConverterBase


class EditorBinding(NamedTuple):
    value_type: Type[GridControlValueBase]
    config_type: Optional[Type[GridEditorConfigBase]] = None


# The editors that ship with the CMS. Value conversion and wrapper resolution
# both read from this table, so they always agree on the types of an alias.
DEFAULT_BINDINGS: Dict[str, EditorBinding] = {
    "media": EditorBinding(GridControlMediaValue),
    "embed": EditorBinding(GridControlEmbedValue),
    "rte": EditorBinding(GridControlRichTextValue),
    "macro": EditorBinding(GridControlMacroValue),
    "headline": EditorBinding(GridControlTextValue, GridEditorTextConfig),
    "quote": EditorBinding(GridControlTextValue, GridEditorTextConfig),
}


class GridConverter(GridConverterBase):
    """
    Converter for the default editors (media, embed, rte, macro, headline, quote).
    Subclasses may extend `bindings` to map more aliases onto the built-in types.
    """
    bindings: Dict[str, EditorBinding] = DEFAULT_BINDINGS

    def get_value_type(self, control) -> Optional[Type[GridControlValueBase]]:
        binding = self.bindings.get(control.editor.alias)
        return binding.value_type if binding else None

    def get_config_type(self, editor) -> Optional[Type[GridEditorConfigBase]]:
        binding = self.bindings.get(editor.alias)
        return binding.config_type if binding else None

    def convert_control_value(self, control, token: Any) -> Optional[GridControlValueBase]:
        value_type = self.get_value_type(control)
        if value_type is None:
            return None
        return value_type.parse(control, token)

    def convert_editor_config(self, editor, token: Any) -> Optional[GridEditorConfigBase]:
        config_type = self.get_config_type(editor)
        if config_type is None:
            return None
        return config_type.parse(editor, token)

    def get_control_wrapper(self, control) -> Optional[GridControlWrapper]:
        value_type = self.get_value_type(control)
        if value_type is None:
            return None
        return GridControlWrapper.create(control, value_type, self.get_config_type(control.editor))


DEFINITION = ConverterDefinition(GridConverter(), aliases=["*"])
