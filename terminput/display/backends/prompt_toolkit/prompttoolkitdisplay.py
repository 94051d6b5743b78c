import sys
from typing import TextIO

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.output import Output, create_output
from prompt_toolkit.output.plain_text import PlainTextOutput
from prompt_toolkit.styles import Style

from ...abstract import DisplayBackend
from ....config import TermInputConfig


class PromptToolkitDisplay(DisplayBackend):
    __error: Output
    __output: Output
    __style: Style

    def __init__(
        self: "PromptToolkitDisplay",
        config: TermInputConfig | None = None,
        output: TextIO | None = None,
        error: TextIO | None = None,
    ) -> None:
        super().__init__(
            config=config if config is not None else TermInputConfig.make_default()
        )

        self.__output = create_output(
            stdout=output if output is not None else sys.stdout
        )
        self.__error = create_output(
            stdout=error if error is not None else sys.stderr
        )
        self.__style = self._default_style

    @property
    def _default_style(self: "PromptToolkitDisplay") -> Style:
        return Style.from_dict(
            {
                "prompt": self.config.prompt_style,
                "error": self.config.error_style,
            }
        )

    def echo(self: "PromptToolkitDisplay", text: str) -> None:
        self.__output.write(text)
        self.__output.flush()

    def end_line(self: "PromptToolkitDisplay") -> None:
        self.__output.write("\n")
        self.__output.flush()

    def erase_last(self: "PromptToolkitDisplay") -> None:
        # plain text output has no cursor movement so the backspaces are
        # written as characters
        if isinstance(self.__output, PlainTextOutput):
            self.__output.write("\b \b")
        else:
            self.__output.cursor_backward(1)
            self.__output.write(" ")
            self.__output.cursor_backward(1)

        self.__output.flush()

    @property
    def style(self: "PromptToolkitDisplay") -> Style:
        return self.__style

    def write_error(self: "PromptToolkitDisplay", message: str) -> None:
        print_formatted_text(
            FormattedText([("class:error", message)]),
            style=self.style,
            output=self.__error,
            flush=True,
        )

    def write_prompt(self: "PromptToolkitDisplay", message: str) -> None:
        print_formatted_text(
            FormattedText([("class:prompt", message)]),
            style=self.style,
            output=self.__output,
            end="",
            flush=True,
        )
