# src/griddata/values/embed.py
import logging
from typing import Any, Optional, Tuple

from bs4 import BeautifulSoup

from ..core import GridControlValueBase
from ..utils.json_utils import get_bool, get_optional_int, get_str

logger = logging.getLogger(__name__)

EMBED_TAGS = ["iframe", "video", "embed", "object", "audio"]


def _inspect_preview(preview: str) -> Tuple[Optional[str], Optional[str]]:
    """Finds the source URL and title of the first embedded element in the preview markup."""
    if not preview or "<" not in preview:
        return None, None

    soup = BeautifulSoup(preview, "html.parser")
    tag = soup.find(EMBED_TAGS)
    if tag is None:
        return None, None

    src = tag.get("src") or tag.get("data")
    title = tag.get("title")
    return (src or None), (title or None)


class GridControlEmbedValue(GridControlValueBase):
    """
    Value of the "embed" editor.

    Older grids store the embed markup as a plain string, newer ones an object
    with the source URL, the requested dimensions and the rendered preview.
    """
    url: str = ""
    preview: str = ""
    width: Optional[int] = None
    height: Optional[int] = None
    constrain: bool = False

    # Parsed out of the preview markup
    src: Optional[str] = None
    title: Optional[str] = None

    @property
    def is_valid(self) -> bool:
        return bool(self.url.strip()) or bool(self.preview.strip())

    @classmethod
    def parse(cls, control, token: Any) -> Optional["GridControlEmbedValue"]:
        if isinstance(token, str):
            src, title = _inspect_preview(token)
            return cls(preview=token, url=src or "", src=src, title=title).bind(control)

        if not isinstance(token, dict):
            return None

        preview = get_str(token, "preview", "")
        src, title = _inspect_preview(preview)
        logger.debug("Embed preview resolved to src=%s", src)

        return cls(
            url=get_str(token, "url", ""),
            preview=preview,
            width=get_optional_int(token, "width"),
            height=get_optional_int(token, "height"),
            constrain=get_bool(token, "constrain"),
            src=src,
            title=title,
        ).bind(control)
