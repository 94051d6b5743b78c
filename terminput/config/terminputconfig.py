"""
module terminput.config.terminputconfig

Contains the definition of the TermInputConfig class, a dataclass that represents
a set of terminput configurations
"""

from dataclasses import dataclass
import json
import os
from typing import Any, Dict, Type
import warnings

from dataclasses_json import DataClassJsonMixin
import platformdirs

from .. import constants
from .displaybackendtype import DisplayBackendType


@dataclass
class TermInputConfig(DataClassJsonMixin):
    """
    class TermInputConfig

    Dataclass that represents a set of terminput configurations. The mask
    glyph and prompt suffixes stored here are handed explicitly to the
    components that render them.
    """

    version: str
    input_mask: str
    get_suffix: str
    ask_suffix: str
    display_backend: DisplayBackendType
    prompt_style: str
    error_style: str

    @staticmethod
    def default_path() -> str:
        """
        Returns the default path that the current user's configuration should be read from

        Args:
            None

        Returns:
            str: The path where the current user's configuration file should be

        Raises:
            Nothing
        """

        return os.path.join(
            platformdirs.user_data_dir(
                appname=constants.APPLICATION_NAME,
                version=constants.APPLICATION_VERSION,
            ),
            "config.json",
        )

    @staticmethod
    def _ensure_directory(dir_path: str) -> None:
        if not os.path.isdir(dir_path):
            os.makedirs(dir_path)

    @staticmethod
    def _ensure_file(file_path: str) -> None:
        # first, ensure the directory exists
        TermInputConfig._ensure_directory(os.path.dirname(file_path))

        # then, create the file if needed
        if not os.path.isfile(file_path):
            TermInputConfig.make_default().to_file(file_path)

    @classmethod
    def from_dict(
        cls: Type["TermInputConfig"],
        json_data: Dict[str, Any],
        *,
        infer_missing: bool = True,
    ) -> "TermInputConfig":
        """
        Constructs a TermInputConfig instance from the provided json dict. Keys
        missing from the dict are filled in from the default configuration

        Args:
            json_data (Dict[str, Any]): The json data from which to construct the
                TermInputConfig
            infer_missing (bool): Accepted for compatibility with
                DataClassJsonMixin.from_json(). Missing keys are always defaulted

        Returns:
            TermInputConfig: A TermInputConfig instance containing the data from the
                provided dict

        Raises:
            ValueError: If the input mask is not exactly one character or the
                display backend is not known
            Exception: If the provided dict does not match the expected layout
                of a TermInputConfig instance
        """

        # pylint: disable=unused-argument
        config_data: Dict[str, Any] = TermInputConfig.make_default().to_dict()
        config_data.update(json_data)

        # the mask replaces one typed character and is erased one column at a time
        if len(config_data["input_mask"]) != 1:
            raise ValueError(
                f"Input mask {config_data['input_mask']!r} must be exactly "
                "one character"
            )

        config_data["display_backend"] = DisplayBackendType(
            config_data["display_backend"]
        )

        return TermInputConfig(**config_data)

    @classmethod
    def from_file(cls: Type["TermInputConfig"], path: str) -> "TermInputConfig | None":
        """
        Constructs a TermInputConfig instance from the provided JSON file

        Args:
            path (str): The file to read JSON config data from

        Returns:
            TermInputConfig | None: A TermInputConfig instance containing the data
                from the provided file or None if the file could not be read

        Raises:
            Nothing
        """

        # check if the config file exists and create it if not
        TermInputConfig._ensure_file(path)

        # pylint: disable=broad-exception-caught
        try:
            with open(path, "r", encoding="utf-8") as config_file:
                return TermInputConfig.from_dict(json.loads(config_file.read()))
        except Exception as exc:
            warnings.warn(f"Unable to read config from target path '{path}': {exc}")
            return None

    @staticmethod
    def make_default() -> "TermInputConfig":
        """
        Constructs a TermInputConfig instance containing the default configuration

        Args:
            None

        Returns:
            TermInputConfig: Instance containing default settings

        Raises:
            Nothing
        """

        return TermInputConfig(
            version=constants.CONFIG_VERSION,
            input_mask=constants.DEFAULT_INPUT_MASK,
            get_suffix=constants.DEFAULT_GET_SUFFIX,
            ask_suffix=constants.DEFAULT_ASK_SUFFIX,
            display_backend=DisplayBackendType.PROMPT_TOOLKIT,
            prompt_style=constants.DEFAULT_PROMPT_STYLE,
            error_style=constants.DEFAULT_ERROR_STYLE,
        )

    def to_file(self: "TermInputConfig", output_path: str) -> None:
        """
        Writes this TermInputConfig instance to the file with the specified path as
        JSON data.

        Args:
            output_path (str): The path of the file to write the config to

        Returns:
            Nothing

        Raises:
            Exception: If the file was unable to be written to
        """

        with open(output_path, "w", encoding="utf-8") as output_file:
            # pylint: disable=no-member
            print(self.to_json(indent=2), file=output_file)
