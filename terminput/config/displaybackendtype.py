from enum import StrEnum


class DisplayBackendType(StrEnum):
    PLAIN = "plain"
    PROMPT_TOOLKIT = "prompt_toolkit"
