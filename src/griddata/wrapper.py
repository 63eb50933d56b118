# src/griddata/wrapper.py
from dataclasses import dataclass
from typing import Generic, Optional, Type, TypeVar, TYPE_CHECKING

from .core import GridControlValueBase, GridEditorConfigBase

if TYPE_CHECKING:
    from .models import GridControl

TValue = TypeVar("TValue", bound=GridControlValueBase)
TConfig = TypeVar("TConfig", bound=GridEditorConfigBase)


@dataclass(frozen=True)
class GridControlWrapper(Generic[TValue, TConfig]):
    """
    Typed view of a control whose value (and config) types are known.

    Rendering code receives one of these instead of switching on the editor
    alias itself.
    """
    control: "GridControl"
    value: TValue
    config: Optional[TConfig] = None

    @property
    def value_type(self) -> Type[GridControlValueBase]:
        return type(self.value)

    @property
    def is_valid(self) -> bool:
        return self.value.is_valid

    @classmethod
    def create(
            cls,
            control: "GridControl",
            value_type: Type[TValue],
            config_type: Optional[Type[TConfig]] = None
    ) -> Optional["GridControlWrapper[TValue, TConfig]"]:
        """
        Wraps `control` if its value is a `value_type` and its editor config, when
        present, is a `config_type`. Returns None on any mismatch.
        """
        value = control.value
        if not isinstance(value, value_type):
            return None

        config = control.editor.config
        if config_type is None:
            return cls(control=control, value=value, config=None)
        if config is not None and not isinstance(config, config_type):
            return None
        return cls(control=control, value=value, config=config)
