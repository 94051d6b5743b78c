import io
import json
import sys

import pytest

from terminput import entrypoint
from terminput.checks import CheckConfigurationException, passes


def parse(*argv: str):
    # pylint: disable=protected-access
    return entrypoint._arg_parser.parse_args(["Message", *argv])


@pytest.fixture
def plain_config(tmp_path):
    config_path = tmp_path / "config.json"
    config_path.write_text(json.dumps({"display_backend": "plain"}), encoding="utf-8")
    return str(config_path)


def test_no_checks_by_default():
    assert entrypoint.build_checks(parse()) == []


def test_checks_follow_fixed_order():
    user_checks = entrypoint.build_checks(
        parse("--numeric", "signed", "--equals", "1", "2", "--length", "1")
    )

    assert len(user_checks) == 3
    assert [passes(check, "1") for check in user_checks] == [True, True, True]
    assert [passes(check, "-1") for check in user_checks] == [False, False, True]


def test_equals_case_sensitive_flag():
    (check,) = entrypoint.build_checks(parse("--equals", "Yes", "--case-sensitive"))

    assert passes(check, "Yes")
    assert not passes(check, "yes")


def test_range_bounds_are_parsed_for_kind():
    (check,) = entrypoint.build_checks(parse("--range", "float", "0.5", "1.5"))

    assert passes(check, "1.0")
    assert not passes(check, "2.0")
    assert not passes(check, "1")


@pytest.mark.parametrize(
    "range_args", [["complex", "1", "2"], ["signed", "a", "2"], ["signed", "5", "1"]]
)
def test_bad_range_is_a_configuration_error(range_args):
    with pytest.raises(CheckConfigurationException):
        entrypoint.build_checks(parse("--range", *range_args))


def test_error_message_wraps_every_check():
    user_checks = entrypoint.build_checks(
        parse("--length", "2", "--charset", "ab", "--error-message", "two of a/b")
    )

    for check in user_checks:
        with pytest.raises(Exception, match="two of a/b"):
            check("c")


def test_main_prints_accepted_value(monkeypatch, capsys, plain_config):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0\n80\n"))

    exit_code = entrypoint.main(
        ["Port", "--range", "unsigned", "1", "65535", "--config", plain_config]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "80\n"
    assert captured.err == "Port: 0\nInvalid Input\nPort: 80\n"


def test_main_ask_prompts_once(monkeypatch, capsys, plain_config):
    monkeypatch.setattr(sys, "stdin", io.StringIO("mY"))

    exit_code = entrypoint.main(
        [
            "Proceed",
            "--ask",
            "--style",
            "instant",
            "--equals",
            "y",
            "n",
            "--config",
            plain_config,
        ]
    )

    captured = capsys.readouterr()
    assert exit_code == 0
    assert captured.out == "Y\n"
    assert captured.err.startswith("Proceed?\nM\n")


def test_main_rejects_bad_check_arguments(capsys, plain_config):
    with pytest.raises(SystemExit):
        entrypoint.main(["Count", "--length", "-1", "--config", plain_config])

    assert "negative" in capsys.readouterr().err


def test_nan_range_bound_is_a_configuration_error():
    with pytest.raises(CheckConfigurationException):
        entrypoint.build_checks(parse("--range", "float", "nan", "1.0"))


def test_main_falls_back_to_defaults_for_long_mask(
    monkeypatch, capsys, tmp_path
):
    config_path = tmp_path / "config.json"
    config_path.write_text(
        json.dumps({"display_backend": "plain", "input_mask": "**"}), encoding="utf-8"
    )
    monkeypatch.setattr(sys, "stdin", io.StringIO("pw\n"))

    with pytest.warns(UserWarning, match="exactly one character"):
        exit_code = entrypoint.main(
            ["Password", "--style", "masked", "--config", str(config_path)]
        )

    assert exit_code == 0
    assert capsys.readouterr().out == "pw\n"
