# src/griddata/values/macro.py
from typing import Any, Dict, Optional

from pydantic import Field

from ..core import GridControlValueBase
from ..utils.json_utils import get_dict, get_str


class GridControlMacroValue(GridControlValueBase):
    """Value of the "macro" editor: the macro alias and its parameters."""
    macro_alias: str = ""
    parameters: Dict[str, Any] = Field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return bool(self.macro_alias.strip())

    @classmethod
    def parse(cls, control, token: Any) -> Optional["GridControlMacroValue"]:
        if not isinstance(token, dict):
            return None
        return cls(
            macro_alias=get_str(token, "macroAlias", ""),
            parameters=get_dict(token, "macroParamsDictionary"),
        ).bind(control)
