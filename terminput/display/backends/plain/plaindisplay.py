import sys
from typing import TextIO

from ...abstract import DisplayBackend
from ....config import TermInputConfig


class PlainDisplay(DisplayBackend):
    __error: TextIO
    __output: TextIO

    def __init__(
        self: "PlainDisplay",
        config: TermInputConfig | None = None,
        output: TextIO | None = None,
        error: TextIO | None = None,
    ) -> None:
        super().__init__(
            config=config if config is not None else TermInputConfig.make_default()
        )

        self.__output = output if output is not None else sys.stdout
        self.__error = error if error is not None else sys.stderr

    def echo(self: "PlainDisplay", text: str) -> None:
        self.__write(text)

    def end_line(self: "PlainDisplay") -> None:
        self.__write("\n")

    def erase_last(self: "PlainDisplay") -> None:
        self.__write("\b \b")

    def __write(self: "PlainDisplay", text: str) -> None:
        self.__output.write(text)
        self.__output.flush()

    def write_error(self: "PlainDisplay", message: str) -> None:
        print(message, file=self.__error, flush=True)

    def write_prompt(self: "PlainDisplay", message: str) -> None:
        self.__write(message)
