# src/griddata/converters/collection.py
import importlib
import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple, Union, TYPE_CHECKING

from ..core import GridControlValueBase, GridEditorConfigBase
from ..exceptions import ConverterRegistrationError
from .base import ConverterDefinition, GridConverterBase

if TYPE_CHECKING:
    from ..models import GridControl, GridEditor
    from ..wrapper import GridControlWrapper

logger = logging.getLogger(__name__)

WILDCARD = "*"

Registrable = Union[GridConverterBase, ConverterDefinition]


class ConverterCollection:
    """
    Ordered registry of converters, keyed by editor alias or the wildcard "*".

    Resolution walks every converter registered for the alias or for the
    wildcard in registration order, and the first converter returning a
    result wins. Declaration order is the only priority: a converter meant to
    override another for the same alias must be registered before it.

    The collection is configured once and then frozen (a GridContext freezes
    the collection it receives). Registering while conversions are running on
    other threads is not supported.
    """

    def __init__(self, converters: Optional[Iterable[Registrable]] = None):
        self._entries: List[Tuple[str, GridConverterBase]] = []
        self._frozen = False
        for item in converters or []:
            self.add(item)

    # --- Registration ---

    def register(self, converter: GridConverterBase, aliases: Optional[Iterable[str]] = None) -> "ConverterCollection":
        """
        Appends `converter` for each of `aliases` (default: the wildcard).

        Raises:
            ConverterRegistrationError: If the collection is frozen or `converter`
                is not a GridConverterBase.
        """
        if self._frozen:
            raise ConverterRegistrationError("Cannot register a converter on a frozen collection.")
        if not isinstance(converter, GridConverterBase):
            raise ConverterRegistrationError(
                f"Expected a GridConverterBase instance, got {type(converter).__name__}."
            )

        keys = list(aliases) if aliases else [WILDCARD]
        for alias in keys:
            self._entries.append((alias, converter))
        logger.debug("Registered converter %r for aliases %s", converter, keys)
        return self

    def add(self, item: Registrable) -> "ConverterCollection":
        """Registers a converter or a ConverterDefinition."""
        if isinstance(item, ConverterDefinition):
            return self.register(item.converter, item.aliases)
        return self.register(item)

    def discover(self, module_names: Iterable[str]) -> "ConverterCollection":
        """
        Imports each dotted module path and registers the converters it exposes.

        A module exposes either `DEFINITION` (a single ConverterDefinition or
        converter) or `CONVERTERS` (a list of them, registered in list order).
        """
        for name in module_names:
            try:
                module = importlib.import_module(name)
            except ImportError as e:
                raise ConverterRegistrationError(f"Could not import converter module '{name}': {e}") from e

            if hasattr(module, "CONVERTERS"):
                items = list(module.CONVERTERS)
            elif hasattr(module, "DEFINITION"):
                items = [module.DEFINITION]
            else:
                raise ConverterRegistrationError(
                    f"Module '{name}' defines neither CONVERTERS nor DEFINITION."
                )

            for item in items:
                self.add(item)
            logger.debug("Loaded %d converter(s) from %s", len(items), name)
        return self

    def freeze(self) -> "ConverterCollection":
        self._frozen = True
        return self

    @property
    def is_frozen(self) -> bool:
        return self._frozen

    # --- Lookup ---

    def candidates(self, alias: str) -> Iterator[GridConverterBase]:
        """Yields the converters consulted for `alias`, in registration order, each once."""
        seen = set()
        for key, converter in self._entries:
            if key != WILDCARD and key != alias:
                continue
            if id(converter) in seen:
                continue
            seen.add(id(converter))
            yield converter

    def resolve_control_value(self, alias: str, token: Any, control: "GridControl") -> Optional[GridControlValueBase]:
        """Returns the first converted value for `control`, or None if no converter handles it."""
        for converter in self.candidates(alias):
            value = converter.convert_control_value(control, token)
            if value is not None:
                return value
        return None

    def resolve_editor_config(self, alias: str, token: Any, editor: "GridEditor") -> Optional[GridEditorConfigBase]:
        """Returns the first converted config for `editor`, or None if the editor has no config."""
        for converter in self.candidates(alias):
            config = converter.convert_editor_config(editor, token)
            if config is not None:
                return config
        return None

    def resolve_wrapper(self, control: "GridControl") -> Optional["GridControlWrapper"]:
        """Returns the first wrapper any converter reports for `control`, or None."""
        for converter in self.candidates(control.editor.alias):
            wrapper = converter.get_control_wrapper(control)
            if wrapper is not None:
                return wrapper
        return None

    # --- Container protocol ---

    def __iter__(self) -> Iterator[GridConverterBase]:
        seen = set()
        for _, converter in self._entries:
            if id(converter) not in seen:
                seen.add(id(converter))
                yield converter

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __contains__(self, converter: object) -> bool:
        return any(existing is converter for _, existing in self._entries)

    def __repr__(self) -> str:
        return f"<ConverterCollection converters={len(self)} frozen={self._frozen}>"
