from __future__ import annotations

import textwrap
from pathlib import Path

import pytest
import yaml

from sigfmt.config import BUILTIN_PRESETS, FormatterConfig, load_config
from sigfmt.errors import ModelLoadError
from sigfmt.formatting import SignatureFormatter
from sigfmt.model import ClassElement, ClassInitializer, Method, ModifierSet, Parameter, TypeRef
from sigfmt.options import FormatFlag


def _write_config(path: Path, payload: dict[str, object]) -> None:
    with path.open("w", encoding="utf-8") as handle:
        yaml.safe_dump(payload, handle)


def test_defaults_without_config_file() -> None:
    config = load_config(None)

    assert config.max_parameters == 7
    assert config.messages.local_class == "local"
    assert config.preset("tooltip").show_initializer
    assert set(BUILTIN_PRESETS) <= set(config.presets)


def test_formatter_section_overrides_defaults(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    _write_config(
        config_path,
        {
            "formatter": {
                "max_parameters": 2,
                "messages": {"local_class": "lokal"},
                "presets": {
                    "hover": "SHOW_NAME|SHOW_TYPE",
                    "listing": ["SHOW_NAME", "SHOW_PARAMETERS"],
                    "explicit": {"show_name": True, "show_raw_type": True},
                },
            }
        },
    )

    config = load_config(config_path)

    assert config.max_parameters == 2
    assert config.messages.local_class == "lokal"
    assert config.preset("hover").to_flags() == FormatFlag.SHOW_NAME | FormatFlag.SHOW_TYPE
    assert config.preset("listing").show_parameters
    assert config.preset("explicit").show_raw_type
    assert "tooltip" in config.presets


def test_top_level_settings_are_accepted(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text("max_parameters: 3\n", encoding="utf-8")

    assert load_config(config_path).max_parameters == 3


@pytest.mark.parametrize(
    "content",
    [
        "formatter:\n  presets:\n    broken: SHOW_EVERYTHING\n",
        "formatter:\n  max_parameters: -1\n",
        "formatter:\n  messages:\n    anonymous_class_derived: no placeholder\n",
        "formatter:\n  unknown: true\n",
        "formatter: [1, 2]\n",
        "- not a mapping\n",
        "formatter: {unclosed\n",
    ],
)
def test_invalid_config_is_reported(tmp_path: Path, content: str) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(content, encoding="utf-8")

    with pytest.raises(ModelLoadError):
        load_config(config_path)


def test_missing_config_file(tmp_path: Path) -> None:
    with pytest.raises(ModelLoadError):
        load_config(tmp_path / "absent.yaml")


def test_unknown_preset_lists_available_names() -> None:
    with pytest.raises(KeyError) as excinfo:
        FormatterConfig().preset("nope")

    assert "tooltip" in str(excinfo.value)


def test_formatter_uses_configured_threshold() -> None:
    config = FormatterConfig.model_validate(
        {"max_parameters": 1, "messages": {"anonymous_class_derived": "anon <{name}>"}}
    )
    formatter = SignatureFormatter.from_config(config)
    method = Method(
        name="put",
        return_type=TypeRef.of("void"),
        modifiers=ModifierSet.of("public"),
        parameters=[Parameter(name="key", type=TypeRef.of("int")), Parameter(name="value", type=TypeRef.of("int"))],
    )
    ClassElement(name="Table", members=[method])

    options = FormatFlag.SHOW_NAME | FormatFlag.SHOW_PARAMETERS
    assert formatter.format_method(method, options) == "put(int, ...)"
    assert formatter.format_method(method, options, max_parameters=5) == "put(int, int)"
    assert formatter.format(method, options, FormatFlag.SHOW_NAME) == "put(key, ...)"


def test_formatter_dispatch_covers_initializers() -> None:
    formatter = SignatureFormatter()
    initializer = ClassElement(name="Table").add_member(ClassInitializer(modifiers=ModifierSet.of("static")))

    assert formatter.format(initializer, FormatFlag.SHOW_MODIFIERS) == "static"
    assert formatter.format(initializer, FormatFlag.SHOW_NAME) == ""


SAMPLE_CONFIG = textwrap.dedent(
    """
    formatter:
      presets:
        brief: SHOW_NAME
    """
).lstrip()


def test_presets_can_be_referenced_after_loading(tmp_path: Path) -> None:
    config_path = tmp_path / "config.yaml"
    config_path.write_text(SAMPLE_CONFIG, encoding="utf-8")

    config = load_config(config_path)

    assert config.preset("brief").flag_names() == ["SHOW_NAME"]
