import io
from dataclasses import dataclass

import pytest

from terminput import TermInput
from terminput.config import TermInputConfig
from terminput.display.backends.plain import PlainDisplay
from terminput.keys.backends.stream import StreamKeyReader


@dataclass
class ScriptedTerminal:
    session: TermInput
    output: io.StringIO
    error: io.StringIO


@pytest.fixture
def scripted_terminal():
    def _make(keys: str, config: TermInputConfig | None = None) -> ScriptedTerminal:
        output: io.StringIO = io.StringIO()
        error: io.StringIO = io.StringIO()

        return ScriptedTerminal(
            session=TermInput(
                key_reader=StreamKeyReader(io.StringIO(keys)),
                display=PlainDisplay(config, output=output, error=error),
                config=config,
            ),
            output=output,
            error=error,
        )

    return _make
