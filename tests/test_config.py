import pytest

from barstatus.components import files, system
from barstatus.config import (
    COMPONENTS,
    VOLUME_COMMAND,
    Arg,
    Config,
    component,
    default_config,
    personal_config,
)
from barstatus.themes import get_theme


def test_component_lookup_returns_function():
    assert component("datetime") is system.datetime
    assert component("run_command") is files.run_command


def test_component_unknown_name_raises():
    with pytest.raises(ValueError):
        component("no_such_component")


def test_arg_format_replaces_value_and_percent():
    entry = Arg(system.gid, " CPU %s%% | ")
    assert entry.format("42") == " CPU 42% | "


def test_arg_format_without_conversion_keeps_text():
    entry = Arg(system.gid, "static")
    assert entry.format("ignored") == "static"


@pytest.mark.parametrize("fmt", ["%d", "value %", "%x%s"])
def test_arg_rejects_unsupported_conversion(fmt):
    with pytest.raises(ValueError):
        Arg(system.gid, fmt)


def test_arg_rejects_non_callable():
    with pytest.raises(TypeError):
        Arg("datetime", "%s")


def test_default_config_matches_stock_values():
    config = default_config()
    assert config.interval == 1000
    assert config.unknown_str == "n/a"
    assert config.maxlen == 2048
    assert config.args == (Arg(system.datetime, "%s", "%F %T"),)


def test_personal_config_entries():
    config = personal_config()
    assert config.unknown_str == "--"
    assert len(config.args) == 7
    assert config.args[0].arg == "BAT0"
    assert config.args[3].fmt == " CPU %s%% | "
    assert config.args[5].arg == VOLUME_COMMAND
    assert config.args[-1].arg == "%Y-%m-%d %H:%M"


def test_personal_config_uses_theme_colours():
    assert personal_config().colors == get_theme().status_colors


def test_personal_config_uses_only_known_components():
    known = set(COMPONENTS.values())
    assert all(entry.func in known for entry in personal_config().args)


@pytest.mark.parametrize("kwargs", [{"interval": 0}, {"maxlen": -1}])
def test_config_rejects_non_positive_limits(kwargs):
    with pytest.raises(ValueError):
        Config(args=(), **kwargs)


def test_config_turns_args_into_tuple():
    entry = Arg(system.gid, "%s")
    assert Config(args=[entry]).args == (entry,)