import io

import pytest

from terminput import checks
from terminput.checks import InvalidInput
from terminput.display.backends.plain import PlainDisplay
from terminput.validation import validate


@pytest.fixture
def display_streams():
    output, error = io.StringIO(), io.StringIO()
    return PlainDisplay(output=output, error=error), output, error


def producer(*candidates: str):
    remaining = list(candidates)
    calls = []

    def _produce() -> str:
        calls.append(remaining[0])
        return remaining.pop(0)

    return _produce, calls


def test_without_checks_returns_first_candidate_unchanged(display_streams):
    display, output, error = display_streams
    produce, calls = producer("\x7f not numeric \t", "unused")

    assert validate(produce, display=display) == "\x7f not numeric \t"
    assert calls == ["\x7f not numeric \t"]
    assert output.getvalue() == "\n"
    assert error.getvalue() == ""


def test_retries_until_every_check_accepts(display_streams):
    display, output, error = display_streams
    produce, calls = producer("", "ab", "abc", "abcd")

    assert validate(produce, checks.length(3), display=display) == "abc"
    assert calls == ["", "ab", "abc"]
    assert error.getvalue() == "Invalid Input\nInvalid Input\n"
    assert output.getvalue() == "\n\n\n"


def test_first_failing_check_reports_its_message(display_streams):
    display, _, error = display_streams
    produce, _ = producer("ab", "123")

    validate(
        produce,
        checks.with_message(checks.length(3), "first"),
        checks.with_message(checks.numeric(), "second"),
        display=display,
    )

    assert error.getvalue() == "first\n"


def test_checks_run_in_order_and_stop_at_first_failure(display_streams):
    display, _, _ = display_streams
    produce, _ = producer("bad", "good")
    calls = []

    def recording(name, rejected):
        def _check(candidate):
            calls.append((name, candidate))
            if candidate == rejected:
                raise InvalidInput()

        return _check

    result = validate(
        produce, recording("a", None), recording("b", "bad"), recording("c", None),
        display=display,
    )

    assert result == "good"
    assert calls == [
        ("a", "bad"),
        ("b", "bad"),
        ("a", "good"),
        ("b", "good"),
        ("c", "good"),
    ]


def test_unexpected_errors_propagate(display_streams):
    display, _, _ = display_streams
    produce, _ = producer("x")

    def broken(_):
        raise KeyError("broken")

    with pytest.raises(KeyError):
        validate(produce, broken, display=display)


def test_default_display_uses_standard_streams(capsys):
    produce, _ = producer("no", "yes")

    assert validate(produce, checks.equals("yes")) == "yes"

    captured = capsys.readouterr()
    assert captured.out == "\n\n"
    assert captured.err == "Invalid Input\n"
