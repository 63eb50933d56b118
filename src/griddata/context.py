# src/griddata/context.py
import logging
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .converters.collection import ConverterCollection
from .converters.default import GridConverter
from .utils.config_manager import ConfigManager, config_manager as default_config_manager
from .utils.html import normalize_whitespace

logger = logging.getLogger(__name__)

DEFAULT_FEATURES: Dict[str, bool] = {
    "normalize_whitespace": False,
}


class GridContext(BaseModel):
    """
    Immutable bundle of the settings every grid operation runs with: the
    culture, the converter collection and feature flags.

    A context is created once (per process or per request) and shared by any
    number of builds and traversals.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    culture: str = "en-US"
    converters: ConverterCollection = Field(default_factory=lambda: ConverterCollection([GridConverter()]).freeze())
    features: Mapping[str, bool] = Field(default_factory=lambda: MappingProxyType(dict(DEFAULT_FEATURES)))

    @field_validator("features", mode="after")
    @classmethod
    def _read_only_features(cls, value: Mapping[str, bool]) -> Mapping[str, bool]:
        return MappingProxyType(dict(value))

    @classmethod
    def create(
            cls,
            converters: Optional[Iterable[Any]] = None,
            include_default: bool = True,
            culture: str = "en-US",
            features: Optional[Dict[str, bool]] = None,
            modules: Optional[Iterable[str]] = None,
    ) -> "GridContext":
        """
        Builds a context whose collection holds `converters` (in the given order),
        then the converters found in `modules`, then the default GridConverter
        unless `include_default` is False.

        Args:
            converters: GridConverterBase instances or ConverterDefinitions.
            include_default: Whether to append the built-in GridConverter last.
            culture: Culture name, e.g. "da-DK".
            features: Feature flags overriding DEFAULT_FEATURES.
            modules: Dotted module paths to discover converters from.
        """
        collection = ConverterCollection()
        for item in converters or []:
            collection.add(item)

        if modules:
            collection.discover(modules)

        if include_default:
            collection.register(GridConverter())

        merged = dict(DEFAULT_FEATURES)
        merged.update(features or {})

        logger.debug("Created GridContext culture=%s converters=%d features=%s", culture, len(collection), merged)
        return cls(culture=culture, converters=collection.freeze(), features=merged)

    @classmethod
    def from_config(
            cls,
            manager: Optional[ConfigManager] = None,
            converters: Optional[Iterable[Any]] = None,
    ) -> "GridContext":
        """Builds a context from the package configuration (settings.json)."""
        manager = manager or default_config_manager
        return cls.create(
            converters=converters,
            include_default=bool(manager.get_nested("converters.include_default", True)),
            culture=manager.get_nested("context.culture", "en-US"),
            features=manager.get_nested("context.features", {}),
            modules=manager.get_nested("converters.modules", []),
        )

    def is_enabled(self, feature: str) -> bool:
        return bool(self.features.get(feature, False))

    def with_features(self, **flags: bool) -> "GridContext":
        """Returns a copy of this context with `flags` set on top of the current feature flags."""
        merged = dict(self.features)
        merged.update(flags)
        return self.model_copy(update={"features": MappingProxyType(merged)})

    def normalize_text(self, text: str) -> str:
        """Prepares a line of searchable text according to the feature flags."""
        if self.is_enabled("normalize_whitespace"):
            return normalize_whitespace(text)
        return (text or "").strip()
