# src/griddata/values/raw.py
from typing import Any

from ..core import GridControlValueBase


class GridControlRawValue(GridControlValueBase):
    """
    Fallback value for editors no converter recognises. Holds the untouched JSON token.
    """
    token: Any = None

    @property
    def is_valid(self) -> bool:
        if self.token is None:
            return False
        if isinstance(self.token, str):
            return bool(self.token.strip())
        if isinstance(self.token, (list, dict)):
            return len(self.token) > 0
        return True

    @classmethod
    def parse(cls, control, token: Any) -> "GridControlRawValue":
        return cls(token=token).bind(control)
