# src/griddata/models.py
from typing import Any, Callable, Dict, List, Optional, Tuple, Type, TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from .core import GridComponent, GridControlValueBase, GridEditorConfigBase
from .wrapper import GridControlWrapper

if TYPE_CHECKING:
    from .context import GridContext
    from .search import SearchTextWriter

ControlPredicate = Callable[["GridControl"], bool]


class GridElement(GridComponent):
    """
    Base model of the structural nodes of a grid (section, row, area, control).

    Nodes compare by identity: they are linked to their parents and siblings,
    and two nodes with equal content are still different positions in a grid.
    """
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False, exclude=True)

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


class GridEditor(BaseModel):
    """Descriptor of the editor a control was created with. Pure metadata."""
    model_config = ConfigDict(frozen=True)

    alias: str = ""
    name: str = ""
    view: Optional[str] = None
    render: Optional[str] = None
    icon: Optional[str] = None
    raw: Dict[str, Any] = Field(default_factory=dict, repr=False, exclude=True)

    _config: Optional[GridEditorConfigBase] = PrivateAttr(default=None)

    @property
    def config(self) -> Optional[GridEditorConfigBase]:
        """The resolved editor config, or None if the editor defines none."""
        return self._config

    @property
    def has_config(self) -> bool:
        return self._config is not None

    def __eq__(self, other: object) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)


class GridControl(GridElement):
    """Leaf of the grid: one editor and its resolved value."""
    editor: GridEditor
    styles: Dict[str, Any] = Field(default_factory=dict)
    config: Dict[str, Any] = Field(default_factory=dict)

    _value: Optional[GridControlValueBase] = PrivateAttr(default=None)
    _area: Optional["GridArea"] = PrivateAttr(default=None)
    _previous: Optional["GridControl"] = PrivateAttr(default=None)
    _next: Optional["GridControl"] = PrivateAttr(default=None)

    @property
    def value(self) -> GridControlValueBase:
        return self._value

    @property
    def area(self) -> Optional["GridArea"]:
        return self._area

    @property
    def previous_control(self) -> Optional["GridControl"]:
        return self._previous

    @property
    def next_control(self) -> Optional["GridControl"]:
        return self._next

    @property
    def is_valid(self) -> bool:
        return self._value is not None and self._value.is_valid

    def get_wrapper(
            self,
            value_type: Type[GridControlValueBase],
            config_type: Optional[Type[GridEditorConfigBase]] = None
    ) -> Optional[GridControlWrapper]:
        """
        Returns a typed wrapper of this control, or None if the resolved value is
        not a `value_type` (or the editor config is not a `config_type`).
        """
        if self._value is None:
            return None
        return GridControlWrapper.create(self, value_type, config_type)

    def write_searchable_text(self, context: "GridContext", writer: "SearchTextWriter") -> None:
        if self._value is not None:
            self._value.write_searchable_text(context, writer)


class GridArea(GridElement):
    """A column of a row, holding controls."""
    grid: int = 0
    allow_all: bool = False
    allowed: Tuple[str, ...] = ()
    styles: Dict[str, Any] = Field(default_factory=dict)
    config: Dict[str, Any] = Field(default_factory=dict)
    controls: Tuple[GridControl, ...] = ()

    _row: Optional["GridRow"] = PrivateAttr(default=None)
    _previous: Optional["GridArea"] = PrivateAttr(default=None)
    _next: Optional["GridArea"] = PrivateAttr(default=None)

    @property
    def row(self) -> Optional["GridRow"]:
        return self._row

    @property
    def previous_area(self) -> Optional["GridArea"]:
        return self._previous

    @property
    def next_area(self) -> Optional["GridArea"]:
        return self._next

    @property
    def has_controls(self) -> bool:
        return len(self.controls) > 0

    @property
    def first_control(self) -> Optional[GridControl]:
        return self.controls[0] if self.controls else None

    @property
    def last_control(self) -> Optional[GridControl]:
        return self.controls[-1] if self.controls else None

    @property
    def is_valid(self) -> bool:
        """True if at least one control is valid."""
        return any(control.is_valid for control in self.controls)

    def write_searchable_text(self, context: "GridContext", writer: "SearchTextWriter") -> None:
        for control in self.controls:
            control.write_searchable_text(context, writer)


class GridRow(GridElement):
    """A row of a section, holding areas."""
    id: str = ""
    label: Optional[str] = None
    name: str = ""
    styles: Dict[str, Any] = Field(default_factory=dict)
    config: Dict[str, Any] = Field(default_factory=dict)
    areas: Tuple[GridArea, ...] = ()

    _section: Optional["GridSection"] = PrivateAttr(default=None)
    _previous: Optional["GridRow"] = PrivateAttr(default=None)
    _next: Optional["GridRow"] = PrivateAttr(default=None)

    @property
    def section(self) -> Optional["GridSection"]:
        return self._section

    @property
    def previous_row(self) -> Optional["GridRow"]:
        """The previous row in the document, possibly in an earlier section."""
        return self._previous

    @property
    def next_row(self) -> Optional["GridRow"]:
        """The next row in the document, possibly in a later section."""
        return self._next

    @property
    def has_label(self) -> bool:
        return bool(self.label and self.label.strip())

    @property
    def has_areas(self) -> bool:
        return len(self.areas) > 0

    @property
    def first_area(self) -> Optional[GridArea]:
        return self.areas[0] if self.areas else None

    @property
    def last_area(self) -> Optional[GridArea]:
        return self.areas[-1] if self.areas else None

    @property
    def is_valid(self) -> bool:
        """True if at least one area is valid."""
        return any(area.is_valid for area in self.areas)

    def get_all_controls(self, alias: Optional[str] = None, predicate: Optional[ControlPredicate] = None) -> List[GridControl]:
        """Returns the controls of all areas, optionally filtered by editor alias and/or predicate."""
        return _filter_controls(
            (control for area in self.areas for control in area.controls), alias, predicate
        )

    def write_searchable_text(self, context: "GridContext", writer: "SearchTextWriter") -> None:
        for area in self.areas:
            area.write_searchable_text(context, writer)


class GridSection(GridElement):
    """A section of the grid layout, holding rows."""
    grid: int = 0
    rows: Tuple[GridRow, ...] = ()

    _model: Optional["GridDataModel"] = PrivateAttr(default=None)
    _previous: Optional["GridSection"] = PrivateAttr(default=None)
    _next: Optional["GridSection"] = PrivateAttr(default=None)

    @property
    def model(self) -> Optional["GridDataModel"]:
        return self._model

    @property
    def previous_section(self) -> Optional["GridSection"]:
        return self._previous

    @property
    def next_section(self) -> Optional["GridSection"]:
        return self._next

    @property
    def has_rows(self) -> bool:
        return len(self.rows) > 0

    @property
    def is_valid(self) -> bool:
        """True if at least one row is valid."""
        return any(row.is_valid for row in self.rows)

    def write_searchable_text(self, context: "GridContext", writer: "SearchTextWriter") -> None:
        for row in self.rows:
            row.write_searchable_text(context, writer)


class GridDataModel(GridElement):
    """
    Root of a parsed grid. Build instances with GridBuilder; a model is
    read-only once returned and may be shared between threads.
    """
    name: str = ""
    sections: Tuple[GridSection, ...] = ()

    @classmethod
    def empty(cls) -> "GridDataModel":
        """Returns a model without sections, as used for a property with no value."""
        return cls()

    @property
    def has_sections(self) -> bool:
        return len(self.sections) > 0

    @property
    def rows(self) -> Tuple[GridRow, ...]:
        """All rows of all sections, in document order."""
        return tuple(row for section in self.sections for row in section.rows)

    @property
    def is_valid(self) -> bool:
        """True if at least one section is valid."""
        return any(section.is_valid for section in self.sections)

    def get_all_controls(self, alias: Optional[str] = None, predicate: Optional[ControlPredicate] = None) -> List[GridControl]:
        """Returns every control in the grid, optionally filtered by editor alias and/or predicate."""
        return _filter_controls(
            (control for row in self.rows for area in row.areas for control in area.controls), alias, predicate
        )

    def write_searchable_text(self, context: "GridContext", writer: "SearchTextWriter") -> None:
        for section in self.sections:
            section.write_searchable_text(context, writer)

    def get_searchable_text(self, context: Optional["GridContext"] = None) -> str:
        """Returns the searchable text of the grid as a single newline separated string."""
        from .search import SearchTextVisitor
        return "\n".join(SearchTextVisitor(context).visit(self))


def _filter_controls(controls, alias: Optional[str], predicate: Optional[ControlPredicate]) -> List[GridControl]:
    result = []
    for control in controls:
        if alias is not None and control.editor.alias != alias:
            continue
        if predicate is not None and not predicate(control):
            continue
        result.append(control)
    return result
