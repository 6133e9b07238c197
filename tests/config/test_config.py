"""Test configuration management."""

from pathlib import Path

import pytest

from fskit.config.config import Config
from fskit.config.paths import default_config_path


def test_default_config(config_runtime_env: Path) -> None:
    """A missing config file yields defaults and is not created."""

    _ = config_runtime_env
    config = Config.load()

    assert config.log_file is None
    assert config.console_log_level == "WARNING"
    assert config.directory_mode == 0o777
    assert config.json_indent == 4
    assert config.template_extension == "tpl"
    assert config.stub_extension == "stub"
    assert not default_config_path().exists()


def test_save_load_toml(config_runtime_env: Path) -> None:
    """Saved values survive a reload from the portable location."""

    _ = config_runtime_env
    original = Config(
        log_file=Path("/test/logs/fskit.log"),
        console_log_level="DEBUG",
        directory_mode=0o750,
        json_indent=2,
    )
    original.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.log_file == Path("/test/logs/fskit.log")
    assert loaded.console_log_level == "DEBUG"
    assert loaded.directory_mode == 0o750
    assert loaded.json_indent == 2
    assert default_config_path().exists()


def test_save_load_none_log_file(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    Config(log_file=None).save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded = Config.load()

    assert loaded.log_file is None


def test_singleton_behavior(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    config1 = Config.load()
    config2 = Config.load()

    assert config2 is config1


def test_toml_comments(config_runtime_env: Path) -> None:
    _ = config_runtime_env
    Config().save()

    with open(default_config_path(), "r", encoding="utf-8") as f:
        content = f.read()

    assert "# fskit Configuration File" in content
    assert "# Log file path" in content
    assert "directory_mode = 0o777" in content


def test_unknown_keys_are_ignored(
    config_runtime_env: Path, caplog: pytest.LogCaptureFixture
) -> None:
    target = default_config_path()
    target.parent.mkdir(parents=True)
    _ = target.write_text('json_indent = 8\nlegacy_option = "x"\n', encoding="utf-8")
    _ = config_runtime_env

    loaded = Config.load()

    assert loaded.json_indent == 8
    assert "legacy_option" in caplog.text


def test_invalid_toml_raises(config_runtime_env: Path) -> None:
    target = default_config_path()
    target.parent.mkdir(parents=True)
    _ = target.write_text("json_indent = = 8\n", encoding="utf-8")
    _ = config_runtime_env

    import tomllib

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()
