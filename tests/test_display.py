import io

from terminput.config import TermInputConfig
from terminput.display import display_backends_by_name
from terminput.display.backends.plain import PlainDisplay
from terminput.display.backends.prompt_toolkit import PromptToolkitDisplay
from terminput.editor import LineEditor
from terminput.keys.backends.stream import StreamKeyReader


def test_plain_display_streams():
    output, error = io.StringIO(), io.StringIO()
    display = PlainDisplay(output=output, error=error)

    display.write_prompt("Name: ")
    display.echo("ab")
    display.erase_last()
    display.end_line()
    display.write_error("Invalid Input")

    assert output.getvalue() == "Name: ab\b \b\n"
    assert error.getvalue() == "Invalid Input\n"


def test_prompt_toolkit_display_writes_plain_text_to_non_terminals():
    output, error = io.StringIO(), io.StringIO()
    display = PromptToolkitDisplay(
        TermInputConfig.make_default(), output=output, error=error
    )

    display.write_prompt("Name: ")
    display.echo("a")
    display.end_line()
    display.write_error("Invalid Input")

    # prompt_toolkit writes newlines as carriage return plus line feed
    assert output.getvalue().replace("\r\n", "\n") == "Name: a\n"
    assert error.getvalue().replace("\r\n", "\n") == "Invalid Input\n"


def test_every_backend_type_has_a_display():
    config = TermInputConfig.make_default()

    for backend_type, display_class in display_backends_by_name.items():
        config.display_backend = backend_type
        assert isinstance(
            display_class(config, output=io.StringIO(), error=io.StringIO()),
            display_class,
        )


def test_prompt_toolkit_display_erases_on_non_terminals():
    output = io.StringIO()
    display = PromptToolkitDisplay(
        TermInputConfig.make_default(), output=output, error=io.StringIO()
    )

    display.echo("a")
    display.erase_last()

    assert output.getvalue() == "a\b \b"


def test_line_editor_delete_through_prompt_toolkit_display():
    output = io.StringIO()
    editor = LineEditor(
        key_reader=StreamKeyReader(io.StringIO("a\x7f\n")),
        display=PromptToolkitDisplay(
            TermInputConfig.make_default(), output=output, error=io.StringIO()
        ),
        mask="*",
    )

    assert editor.read_line() == ""
    assert output.getvalue() == "a\b \b"
