"""YAML-backed configuration for the formatter and its CLI."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ModelLoadError
from .external_name import EXTERNAL_METHOD_OPTIONS
from .messages import MessageBundle
from .options import MAX_PARAMS_TO_SHOW, FormatFlag, FormatOptions

__all__ = ["BUILTIN_PRESETS", "CONFIG_SECTION", "FormatterConfig", "load_config"]

LOGGER = logging.getLogger(__name__)

CONFIG_SECTION = "formatter"

BUILTIN_PRESETS: Dict[str, FormatOptions] = {
    "tooltip": FormatOptions.from_flags(
        FormatFlag.SHOW_MODIFIERS
        | FormatFlag.SHOW_TYPE
        | FormatFlag.SHOW_NAME
        | FormatFlag.SHOW_PARAMETERS
        | FormatFlag.SHOW_THROWS
        | FormatFlag.SHOW_INITIALIZER
    ),
    "completion": FormatOptions.from_flags(
        FormatFlag.SHOW_NAME | FormatFlag.SHOW_PARAMETERS | FormatFlag.SHOW_TYPE | FormatFlag.TYPE_AFTER
    ),
    "javadoc": FormatOptions.from_flags(
        FormatFlag.SHOW_MODIFIERS
        | FormatFlag.SHOW_TYPE
        | FormatFlag.SHOW_NAME
        | FormatFlag.SHOW_PARAMETERS
        | FormatFlag.SHOW_THROWS
        | FormatFlag.SHOW_EXTENDS_IMPLEMENTS
        | FormatFlag.JAVADOC_MODIFIERS_ONLY
    ),
    "external_method": FormatOptions.from_flags(EXTERNAL_METHOD_OPTIONS),
    "external_parameter": FormatOptions.from_flags(FormatFlag.SHOW_TYPE | FormatFlag.SHOW_FQ_CLASS_NAMES),
}


class FormatterConfig(BaseModel):
    """Formatter settings: parameter threshold, phrases and named option presets."""

    model_config = ConfigDict(extra="forbid")

    max_parameters: int = Field(default=MAX_PARAMS_TO_SHOW, ge=0)
    messages: MessageBundle = Field(default_factory=MessageBundle)
    presets: Dict[str, FormatOptions] = Field(default_factory=lambda: dict(BUILTIN_PRESETS))

    @field_validator("presets", mode="before")
    @classmethod
    def _merge_presets(cls, value: Any) -> Dict[str, Any]:
        merged: Dict[str, Any] = dict(BUILTIN_PRESETS)
        if value is None:
            return merged
        if not isinstance(value, Mapping):
            raise ValueError("presets must be a mapping of name to flags")
        for name, raw in value.items():
            if isinstance(raw, (FormatOptions, Mapping)):
                merged[str(name)] = raw
                continue
            try:
                merged[str(name)] = FormatOptions.coerce(raw)
            except TypeError as error:
                raise ValueError(f"preset '{name}': {error}") from error
        return merged

    def preset(self, name: str) -> FormatOptions:
        try:
            return self.presets[name]
        except KeyError:
            available = ", ".join(sorted(self.presets))
            raise KeyError(f"Unknown preset '{name}'. Available: {available}") from None


def load_config(path: Optional[Path]) -> FormatterConfig:
    """Load formatter settings from a YAML file; ``None`` yields the defaults.

    The file may hold the settings at the top level or under a
    ``formatter`` section.
    """
    if path is None:
        return FormatterConfig()
    if not path.exists():
        raise ModelLoadError(f"Config file not found: {path}")

    try:
        with path.open("r", encoding="utf-8") as handle:
            data = yaml.safe_load(handle) or {}
    except yaml.YAMLError as error:
        raise ModelLoadError(f"Failed to parse config: {error}") from error

    if not isinstance(data, dict):
        raise ModelLoadError("Configuration must be a mapping at the top level.")

    section = data.get(CONFIG_SECTION, data)
    if not isinstance(section, dict):
        raise ModelLoadError(f"'{CONFIG_SECTION}' section must be a mapping.")

    try:
        config = FormatterConfig.model_validate(section)
    except ValidationError as error:
        raise ModelLoadError(f"Invalid formatter configuration in {path}: {error}") from error
    LOGGER.debug("Loaded formatter config from %s (%d preset(s))", path, len(config.presets))
    return config
