from enum import StrEnum


class InputStyle(StrEnum):
    BASIC = "basic"
    MASKED = "masked"
    INSTANT = "instant"
