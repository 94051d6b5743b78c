import json
import os

import pytest

from terminput.config import DisplayBackendType, TermInputConfig


def test_default_config():
    config = TermInputConfig.make_default()

    assert config.input_mask == "*"
    assert config.get_suffix == ": "
    assert config.ask_suffix == "?\n"
    assert config.display_backend == DisplayBackendType.PROMPT_TOOLKIT


def test_default_path_is_json_file():
    assert os.path.basename(TermInputConfig.default_path()) == "config.json"


def test_from_file_creates_missing_file(tmp_path):
    config_path = tmp_path / "nested" / "config.json"

    config = TermInputConfig.from_file(str(config_path))

    assert config_path.is_file()
    assert config == TermInputConfig.make_default()


def test_written_config_is_read_back(tmp_path):
    config_path = str(tmp_path / "config.json")
    config = TermInputConfig.make_default()
    config.display_backend = DisplayBackendType.PLAIN
    config.error_style = "fg:ansiyellow"
    config.to_file(config_path)

    assert TermInputConfig.from_file(config_path) == config


def test_missing_keys_use_defaults(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"input_mask": "x"}), encoding="utf-8")

    config = TermInputConfig.from_file(str(config_path))

    assert config.input_mask == "x"
    assert config.get_suffix == ": "


def test_unreadable_config_warns(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text("{not json", encoding="utf-8")

    with pytest.warns(UserWarning, match="Unable to read config"):
        assert TermInputConfig.from_file(str(config_path)) is None


def test_unknown_display_backend_warns(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"display_backend": "curses"}), encoding="utf-8")

    with pytest.warns(UserWarning):
        assert TermInputConfig.from_file(str(config_path)) is None


def test_from_dict_fills_missing_keys():
    config = TermInputConfig.from_dict({"display_backend": "plain"})

    assert config.display_backend == DisplayBackendType.PLAIN
    assert config.version == TermInputConfig.make_default().version
    assert config.input_mask == "*"


@pytest.mark.parametrize("mask", ["", "**"])
def test_from_dict_rejects_mask_that_is_not_one_character(mask):
    with pytest.raises(ValueError, match="exactly one character"):
        TermInputConfig.from_dict({"input_mask": mask})


def test_config_with_long_mask_warns(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"input_mask": "**"}), encoding="utf-8")

    with pytest.warns(UserWarning, match="exactly one character"):
        assert TermInputConfig.from_file(str(config_path)) is None
