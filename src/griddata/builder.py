# src/griddata/builder.py
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from .context import GridContext
from .exceptions import GridParseError
from .models import GridArea, GridControl, GridDataModel, GridEditor, GridRow, GridSection
from .utils.json_utils import get_bool, get_dict, get_int, get_str, get_str_list
from .values.raw import GridControlRawValue

logger = logging.getLogger(__name__)

GridSource = Union[str, bytes, Mapping[str, Any]]


def link_siblings(items: Sequence[Any]) -> None:
    """
    Wires the `_previous` / `_next` links of a sibling sequence in one pass.
    The first item has no previous and the last item no next.
    """
    for i in range(1, len(items)):
        items[i - 1]._next = items[i]
        items[i]._previous = items[i - 1]


class GridBuilder:
    """
    Builder responsible for parsing raw grid JSON into a GridDataModel.

    The document is read top-down (sections, rows, areas, controls). Once the
    nodes exist, a single wiring pass sets back references and sibling links,
    and resolves every editor config and control value through the context's
    converter collection. The returned model is not modified afterwards.
    """

    def __init__(self, context: Optional[GridContext] = None):
        self.context = context or GridContext.create()

    # --- Entry points ---

    def parse(self, source: GridSource) -> GridDataModel:
        """
        Parses a grid from a JSON string/bytes or an already decoded mapping.

        Raises:
            GridParseError: If the JSON is invalid, the root is not an object or
                a child array holds something other than objects.
        """
        data = self._decode(source)
        model = GridDataModel(
            name=get_str(data, "name", ""),
            sections=tuple(
                self._parse_section(item, f"$.sections[{i}]")
                for i, item in enumerate(self._get_array(data, "sections", "$"))
            ),
            raw=dict(data),
        )
        self._wire(model)
        logger.debug(
            "Parsed grid '%s' with %d section(s) and %d row(s)", model.name, len(model.sections), len(model.rows)
        )
        return model

    def parse_file(self, path: Union[str, Path]) -> GridDataModel:
        """Reads and parses a grid JSON file."""
        with open(path, "rb") as f:
            return self.parse(f.read())

    # --- Decoding helpers ---

    @staticmethod
    def _decode(source: GridSource) -> Dict[str, Any]:
        if isinstance(source, (str, bytes)):
            if not source.strip():
                return {}
            try:
                source = json.loads(source)
            except json.JSONDecodeError as e:
                raise GridParseError(f"Invalid JSON: {e.msg}") from e
            except UnicodeDecodeError as e:
                raise GridParseError(f"Invalid encoding: {e.reason}") from e

        if not isinstance(source, Mapping):
            raise GridParseError(f"Expected a JSON object, got {type(source).__name__}")
        return dict(source)

    @staticmethod
    def _get_array(obj: Mapping[str, Any], key: str, path: str) -> List[Dict[str, Any]]:
        """
        Reads a child array. A missing or non-array value counts as empty; an
        array holding anything but objects fails the whole parse.
        """
        value = obj.get(key)
        if value is None:
            return []
        if not isinstance(value, list):
            logger.warning("Expected an array at %s.%s, got %s. Treating as empty.", path, key, type(value).__name__)
            return []

        for i, item in enumerate(value):
            if not isinstance(item, dict):
                raise GridParseError(f"Expected an object, got {type(item).__name__}", f"{path}.{key}[{i}]")
        return value

    # --- Node parsers ---

    def _parse_section(self, data: Dict[str, Any], path: str) -> GridSection:
        return GridSection(
            grid=get_int(data, "grid"),
            rows=tuple(
                self._parse_row(item, f"{path}.rows[{i}]")
                for i, item in enumerate(self._get_array(data, "rows", path))
            ),
            raw=data,
        )

    def _parse_row(self, data: Dict[str, Any], path: str) -> GridRow:
        row_id = get_str(data, "id")
        if row_id is None:
            logger.debug("Row at %s has no id.", path)

        return GridRow(
            id=row_id or "",
            label=get_str(data, "label"),
            name=get_str(data, "name", ""),
            styles=get_dict(data, "styles"),
            config=get_dict(data, "config"),
            areas=tuple(
                self._parse_area(item, f"{path}.areas[{i}]")
                for i, item in enumerate(self._get_array(data, "areas", path))
            ),
            raw=data,
        )

    def _parse_area(self, data: Dict[str, Any], path: str) -> GridArea:
        return GridArea(
            grid=get_int(data, "grid"),
            allow_all=get_bool(data, "allowAll"),
            allowed=tuple(get_str_list(data, "allowed")),
            styles=get_dict(data, "styles"),
            config=get_dict(data, "config"),
            controls=tuple(
                self._parse_control(item, f"{path}.controls[{i}]")
                for i, item in enumerate(self._get_array(data, "controls", path))
            ),
            raw=data,
        )

    def _parse_control(self, data: Dict[str, Any], path: str) -> GridControl:
        editor_json = data.get("editor")
        if not isinstance(editor_json, dict):
            logger.warning("Control at %s has no editor object. Using an empty editor.", path)
            editor_json = {}

        editor = GridEditor(
            alias=get_str(editor_json, "alias", ""),
            name=get_str(editor_json, "name", ""),
            view=get_str(editor_json, "view"),
            render=get_str(editor_json, "render"),
            icon=get_str(editor_json, "icon"),
            raw=editor_json,
        )
        return GridControl(
            editor=editor,
            styles=get_dict(data, "styles"),
            config=get_dict(data, "config"),
            raw=data,
        )

    # --- Wiring ---

    def _wire(self, model: GridDataModel) -> None:
        """Sets back references and sibling links, then resolves configs and values."""
        link_siblings(model.sections)
        link_siblings(model.rows)

        for section in model.sections:
            section._model = model
            for row in section.rows:
                row._section = section
                link_siblings(row.areas)
                for area in row.areas:
                    area._row = row
                    link_siblings(area.controls)
                    for control in area.controls:
                        control._area = area
                        self._resolve_control(control)

    def _resolve_control(self, control: GridControl) -> None:
        converters = self.context.converters
        editor = control.editor
        alias = editor.alias

        editor._config = converters.resolve_editor_config(alias, editor.raw.get("config"), editor)

        token = control.raw.get("value")
        value = converters.resolve_control_value(alias, token, control)
        if value is None:
            logger.debug("No converter handled editor '%s'. Falling back to raw value.", alias)
            value = GridControlRawValue.parse(control, token)
        control._value = value
