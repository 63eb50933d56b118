# src/griddata/values/html.py
from ..utils.html import normalize_whitespace, replace_tags, strip_paragraphs
from .text import GridControlTextValue


class GridControlHtmlValue(GridControlTextValue):
    """
    Value holding an HTML fragment.

    Empty paragraphs do not count as content, so "<p></p>" is not valid.
    """

    @property
    def is_valid(self) -> bool:
        return bool(strip_paragraphs(self.value).strip())

    @property
    def text(self) -> str:
        """The fragment with all tags removed and whitespace collapsed."""
        return normalize_whitespace(replace_tags(self.value))


class GridControlRichTextValue(GridControlHtmlValue):
    """Value of the rich text editor ("rte")."""
