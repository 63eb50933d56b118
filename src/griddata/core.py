# src/griddata/core.py
from abc import abstractmethod
from typing import Any, Optional, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, PrivateAttr

# Prevent circular imports during runtime, but retain type hinting for static analysis
if TYPE_CHECKING:
    from .context import GridContext
    from .models import GridControl, GridEditor
    from .search import SearchTextWriter


class GridComponent(BaseModel):
    """
    Shared capability of every node, value and config in a grid tree.

    Instances are frozen once constructed. The only state assigned afterwards
    lives in private attributes (back references, sibling links, resolved
    values), which the GridBuilder sets exactly once before the tree is
    handed to a caller.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    @property
    @abstractmethod
    def is_valid(self) -> bool:
        """Returns True if the component holds meaningful content."""

    def write_searchable_text(self, context: "GridContext", writer: "SearchTextWriter") -> None:
        """Writes zero or more lines of plain text to `writer`. Contributes nothing by default."""
        return None


class GridControlValueBase(GridComponent):
    """
    Base class for the resolved value of a GridControl.

    Subclasses implement `parse`, returning None when the raw token does not
    have the shape they understand.
    """
    _control: Optional["GridControl"] = PrivateAttr(default=None)

    @property
    def control(self) -> Optional["GridControl"]:
        """The control this value belongs to."""
        return self._control

    @classmethod
    @abstractmethod
    def parse(cls, control: "GridControl", token: Any) -> Optional["GridControlValueBase"]:
        """Creates a value from the raw JSON `token` of `control`."""

    def bind(self, control: "GridControl") -> "GridControlValueBase":
        self._control = control
        return self


class GridEditorConfigBase(GridComponent):
    """Base class for the resolved config of a GridEditor."""
    _editor: Optional["GridEditor"] = PrivateAttr(default=None)

    @property
    def editor(self) -> Optional["GridEditor"]:
        return self._editor

    @property
    def is_valid(self) -> bool:
        return True

    @classmethod
    @abstractmethod
    def parse(cls, editor: "GridEditor", token: Any) -> Optional["GridEditorConfigBase"]:
        """Creates a config from the raw JSON `token` of `editor`."""

    def bind(self, editor: "GridEditor") -> "GridEditorConfigBase":
        self._editor = editor
        return self
