# src/griddata/values/media.py
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict

from ..core import GridControlValueBase
from ..utils.json_utils import get_dict, get_float, get_int, get_optional_int, get_str


class GridControlMediaFocalPoint(BaseModel):
    """Focal point of an image, both coordinates relative (0..1) to its size."""
    model_config = ConfigDict(frozen=True)

    left: float = 0.5
    top: float = 0.5


class GridControlMediaValue(GridControlValueBase):
    """
    Value of the "media" editor: a reference to an image in the media library.
    Media values contribute no searchable text.
    """
    id: int = 0
    udi: Optional[str] = None
    image: str = ""
    alt_text: str = ""
    caption: str = ""
    focal_point: Optional[GridControlMediaFocalPoint] = None
    width: Optional[int] = None
    height: Optional[int] = None

    @property
    def has_caption(self) -> bool:
        return bool(self.caption.strip())

    @property
    def is_valid(self) -> bool:
        return bool(self.image.strip()) or self.id > 0 or bool(self.udi)

    @classmethod
    def parse(cls, control, token: Any) -> Optional["GridControlMediaValue"]:
        if not isinstance(token, dict):
            return None

        focal_point = None
        focal_json = get_dict(token, "focalPoint")
        if focal_json:
            focal_point = GridControlMediaFocalPoint(
                left=get_float(focal_json, "left", 0.5),
                top=get_float(focal_json, "top", 0.5),
            )

        return cls(
            id=get_int(token, "id"),
            udi=get_str(token, "udi"),
            image=get_str(token, "image", ""),
            alt_text=get_str(token, "altText", ""),
            caption=get_str(token, "caption", ""),
            focal_point=focal_point,
            width=get_optional_int(token, "width"),
            height=get_optional_int(token, "height"),
        ).bind(control)
