# src/griddata/values/__init__.py
from .text import GridControlTextValue, GridEditorTextConfig
from .html import GridControlHtmlValue, GridControlRichTextValue
from .media import GridControlMediaValue, GridControlMediaFocalPoint
from .embed import GridControlEmbedValue
from .macro import GridControlMacroValue
from .raw import GridControlRawValue

__all__ = [
    "GridControlTextValue",
    "GridEditorTextConfig",
    "GridControlHtmlValue",
    "GridControlRichTextValue",
    "GridControlMediaValue",
    "GridControlMediaFocalPoint",
    "GridControlEmbedValue",
    "GridControlMacroValue",
    "GridControlRawValue",
]
