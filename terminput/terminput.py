from typing import Any

from .checks import CheckFunction
from .config import TermInputConfig
from .context import BackendSet, TermInputContext
from .display import DisplayBackend, display_backends_by_name
from .editor import InputFunction, InputStyle, LineEditor
from .keys import KeyReader, platform_key_reader
from .validation import validate


class TermInput:
    """
    class TermInput

    A session that reads validated input from one console. Sessions are not
    safe to use from more than one thread at a time since each read changes
    the mode of the controlling terminal
    """

    __context: TermInputContext
    __line_editor: LineEditor

    def __init__(
        self: "TermInput",
        key_reader: KeyReader | None = None,
        display: DisplayBackend | None = None,
        config: TermInputConfig | None = None,
        config_path: str | None = None,
    ) -> None:
        # try reading a config instance from the provided config file. otherwise, fall
        # back to the provided config or the default one
        if config is None and config_path is not None:
            config = TermInputConfig.from_file(config_path)
        if config is None:
            config = TermInputConfig.make_default()

        self.__context = TermInputContext(
            backends=BackendSet(
                display=(
                    display
                    if display is not None
                    else display_backends_by_name[config.display_backend](config)
                ),
                keys=key_reader if key_reader is not None else platform_key_reader()(),
            ),
            config=config,
            config_path=config_path,
        )
        self.__line_editor = LineEditor(
            key_reader=self.context.backends.keys,
            display=self.context.backends.display,
            mask=config.input_mask,
        )

    def ask(
        self: "TermInput",
        question: str,
        *checks: CheckFunction,
        style: InputStyle = InputStyle.BASIC,
        prompt_once: bool = True,
    ) -> str:
        return self.prompt(
            question + self.context.config.ask_suffix,
            *checks,
            style=style,
            prompt_once=prompt_once,
        )

    @property
    def context(self: "TermInput") -> TermInputContext:
        return self.__context

    def get(
        self: "TermInput",
        message: str,
        *checks: CheckFunction,
        style: InputStyle = InputStyle.BASIC,
        prompt_once: bool = False,
    ) -> str:
        return self.prompt(
            message + self.context.config.get_suffix,
            *checks,
            style=style,
            prompt_once=prompt_once,
        )

    @property
    def line_editor(self: "TermInput") -> LineEditor:
        return self.__line_editor

    def prompt(
        self: "TermInput",
        message: str,
        *checks: CheckFunction,
        style: InputStyle = InputStyle.BASIC,
        prompt_once: bool = False,
    ) -> str:
        """
        Prompts the user with a message and reads input until every check accepts it

        Args:
            message (str): The message to show before input is read
            *checks (CheckFunction): The checks the input must pass
            style (InputStyle): The style of input to read
            prompt_once (bool): Whether the message is shown once before the first
                attempt or before every attempt

        Returns:
            str: The validated input

        Raises:
            Exception: Any exception other than InvalidInput raised by a check
        """

        display: DisplayBackend = self.context.backends.display
        input_function: InputFunction = self.line_editor.input_function(style)

        if prompt_once:
            display.write_prompt(message)
            return validate(input_function, *checks, display=display)

        def prompted_input_function() -> str:
            display.write_prompt(message)
            return input_function()

        return validate(prompted_input_function, *checks, display=display)

    def read(
        self: "TermInput", *checks: CheckFunction, style: InputStyle = InputStyle.BASIC
    ) -> str:
        """
        Reads input in the provided style until every check accepts it

        Args:
            *checks (CheckFunction): The checks the input must pass
            style (InputStyle): The style of input to read

        Returns:
            str: The validated input

        Raises:
            Exception: Any exception other than InvalidInput raised by a check
        """

        return validate(
            self.line_editor.input_function(style),
            *checks,
            display=self.context.backends.display,
        )


def ask(question: str, *checks: CheckFunction, **kwargs: Any) -> str:
    return TermInput().ask(question, *checks, **kwargs)


def get(message: str, *checks: CheckFunction, **kwargs: Any) -> str:
    return TermInput().get(message, *checks, **kwargs)


def prompt(message: str, *checks: CheckFunction, **kwargs: Any) -> str:
    return TermInput().prompt(message, *checks, **kwargs)


def read(*checks: CheckFunction, **kwargs: Any) -> str:
    return TermInput().read(*checks, **kwargs)
