# src/griddata/values/text.py
import json
from typing import Any, Optional

from ..core import GridControlValueBase, GridEditorConfigBase
from ..utils.html import replace_tags
from ..utils.json_utils import get_str


class GridControlTextValue(GridControlValueBase):
    """
    Value of a plain text control, e.g. the "headline" and "quote" editors.
    """
    value: str = ""

    @property
    def is_valid(self) -> bool:
        """A text value is valid when it contains anything but whitespace."""
        return bool(self.value and self.value.strip())

    def write_searchable_text(self, context, writer) -> None:
        text = context.normalize_text(replace_tags(self.value))
        if text:
            writer.write_line(text)

    @classmethod
    def parse(cls, control, token: Any) -> Optional["GridControlTextValue"]:
        if token is None:
            return None
        if isinstance(token, str):
            text = token
        elif isinstance(token, (dict, list)):
            text = json.dumps(token)
        else:
            text = str(token)
        return cls(value=text).bind(control)

    def __str__(self) -> str:
        return self.value


class GridEditorTextConfig(GridEditorConfigBase):
    """
    Config of the text editors, holding the inline style and the markup template.
    The template uses "#value#" as the placeholder of the control value.
    """
    style: str = ""
    markup: str = ""

    @property
    def has_style(self) -> bool:
        return bool(self.style.strip())

    @property
    def has_markup(self) -> bool:
        return bool(self.markup.strip())

    def render(self, value: str) -> str:
        """Inserts `value` into the markup template, or returns it untouched if there is none."""
        if not self.has_markup:
            return value
        return self.markup.replace("#value#", value)

    @classmethod
    def parse(cls, editor, token: Any) -> Optional["GridEditorTextConfig"]:
        if not isinstance(token, dict):
            return None
        return cls(
            style=get_str(token, "style", ""),
            markup=get_str(token, "markup", ""),
        ).bind(editor)
