"""Unit tests for the configuration document layer."""
from __future__ import annotations

import json
import os

import pytest
import yaml

from regsuit_core.base.errors import ErrorCode, RegSuitError
from regsuit_core.config import ConfigManager, default_config, read_config_file, validate_config
from regsuit_core.config.env import load_dotenv_once, replace_env_values
from regsuit_core.tests.utils import make_config


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("REG_SUIT_CONFIG_FILE", raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))


def test_read_config_file_missing_returns_none(tmp_path):
    assert read_config_file(tmp_path / "nope.json") is None  # nosec B101 - pytest assert in tests


def test_read_json_and_yaml(tmp_path):
    document = make_config({"a": True, "b": {"x": 1}}, thresholdRate=0.1)
    (tmp_path / "c.json").write_text(json.dumps(document), encoding="utf-8")
    (tmp_path / "c.yml").write_text(yaml.safe_dump(document), encoding="utf-8")

    assert read_config_file(tmp_path / "c.json") == document  # nosec B101 - pytest assert in tests
    assert read_config_file(tmp_path / "c.yml") == document  # nosec B101 - pytest assert in tests


@pytest.mark.parametrize("name, text", [("bad.json", "{not json"), ("list.json", "[1, 2]"), ("bad.yaml", "a: [")])
def test_unreadable_config_is_invalid(tmp_path, name, text):
    (tmp_path / name).write_text(text, encoding="utf-8")
    with pytest.raises(RegSuitError) as info:
        read_config_file(tmp_path / name)
    assert info.value.code is ErrorCode.INVALID_CONFIG  # nosec B101 - pytest assert in tests


def test_validate_config_rejects_bad_core_values():
    with pytest.raises(RegSuitError) as info:
        validate_config(make_config(thresholdRate=-1))
    assert info.value.code is ErrorCode.INVALID_CONFIG  # nosec B101 - pytest assert in tests


def test_core_aliases_round_trip_and_extras_are_kept():
    config = validate_config(make_config({"p": True}, enableAntialias=True, customKey="kept"))
    assert config.core.working_dir == ".reg"  # nosec B101 - pytest assert in tests
    assert config.core.enable_antialias is True  # nosec B101 - pytest assert in tests
    document = config.to_document()
    assert document["core"]["workingDir"] == ".reg"  # nosec B101 - pytest assert in tests
    assert document["core"]["customKey"] == "kept"  # nosec B101 - pytest assert in tests
    assert document["plugins"] == {"p": True}  # nosec B101 - pytest assert in tests


def test_manager_falls_back_to_defaults(tmp_path):
    manager = ConfigManager()
    assert manager.config_file_name == "regconfig.json"  # nosec B101 - pytest assert in tests
    assert manager.raw_config == default_config()  # nosec B101 - pytest assert in tests
    assert manager.raw_config.core.ximgdiff.invocation_type == "client"  # nosec B101


def test_manager_honours_config_file_env(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    path.write_text(yaml.safe_dump(make_config({"p": True})), encoding="utf-8")
    monkeypatch.setenv("REG_SUIT_CONFIG_FILE", str(path))
    assert ConfigManager().raw_config.plugins == {"p": True}  # nosec B101 - pytest assert in tests


def test_replaced_config_substitutes_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("REGSUIT_TEST_BUCKET", "shots")
    monkeypatch.delenv("REGSUIT_TEST_UNSET", raising=False)
    (tmp_path / "regconfig.json").write_text(
        json.dumps(make_config({"s3": {"bucket": "$REGSUIT_TEST_BUCKET", "prefix": "$REGSUIT_TEST_UNSET"}})),
        encoding="utf-8",
    )
    manager = ConfigManager()

    assert manager.raw_config.plugins["s3"]["bucket"] == "$REGSUIT_TEST_BUCKET"  # nosec B101
    assert manager.replaced_config.plugins["s3"] == {"bucket": "shots", "prefix": "$REGSUIT_TEST_UNSET"}  # nosec B101


def test_replace_env_values_returns_new_containers():
    source = {"a": ["$X", {"b": "$X"}], "c": 1, "d": "$"}
    result = replace_env_values(source, {"X": "y"})
    assert result == {"a": ["y", {"b": "y"}], "c": 1, "d": "$"}  # nosec B101 - pytest assert in tests
    assert source["a"][0] == "$X"  # nosec B101 - pytest assert in tests


def test_write_config_persists_plugins_section(tmp_path):
    manager = ConfigManager()
    updated = manager.with_plugins({"s3": {"bucket": "shots"}, "notify": {}})
    path = manager.write_config(updated)

    assert json.loads(path.read_text(encoding="utf-8"))["plugins"] == {"s3": {"bucket": "shots"}, "notify": {}}  # nosec B101
    assert manager.raw_config.plugins == {"s3": {"bucket": "shots"}, "notify": {}}  # nosec B101


def test_load_dotenv_never_overrides_existing_variables(tmp_path, monkeypatch):
    env_file = tmp_path / "test.env"
    env_file.write_text(
        "# comment\nREGSUIT_TEST_KEPT=https://from-dotenv\nREGSUIT_TEST_FILLED='from-file'\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("REGSUIT_TEST_KEPT", "https://example.com/real")
    # Registered with monkeypatch so the value loaded from the file is undone too.
    monkeypatch.setenv("REGSUIT_TEST_FILLED", "unset")
    monkeypatch.delenv("REGSUIT_TEST_FILLED")

    load_dotenv_once(str(env_file))

    assert os.environ["REGSUIT_TEST_KEPT"] == "https://example.com/real"  # nosec B101 - pytest assert in tests
    assert os.environ["REGSUIT_TEST_FILLED"] == "from-file"  # nosec B101 - pytest assert in tests
