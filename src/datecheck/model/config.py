"""Manage configuration settings for the Date Validator application."""

import argparse
import dataclasses
import enum
import pathlib
import shutil
import tomllib
from typing import Any, Optional


CONFIG_FILE_NAME = "datecheck.toml"


class ConfigError(Exception):
    """Errors when setting or accessing settings."""

    class ErrorType(enum.Enum):
        NOT_A_FILE = 1
        PATH_DOES_NOT_EXIST = 2
        INVALID_VALUE = 3

    error_type: ErrorType

    def __init__(self, message: str, error_type: ErrorType) -> None:
        """Set error type."""
        super().__init__(message)
        self.error_type = error_type


class InputMode(enum.StrEnum):
    """How the user types in a date."""

    SEPARATE = "separate"
    SINGLE = "single"


@dataclasses.dataclass
class Settings:
    """Configuration data for the datecheck application.

    input_mode selects which input fields the application shows at start-up.
    The date info panel (weekday, leap year, days in month) is hidden when
    show_date_info is false.
    """

    config_path: Optional[pathlib.Path] = None
    input_mode: InputMode = InputMode.SEPARATE
    show_date_info: bool = True

    def update_from_args(self, args: argparse.Namespace) -> None:
        """Read settings."""
        explicit_path = getattr(args, "config_path", None)
        self.config_path = self._get_full_path(explicit_path, CONFIG_FILE_NAME)
        if self.config_path is not None:
            self._read_config_file()

    @staticmethod
    def _get_full_path(
        path: Optional[pathlib.Path], default_file_name: str
    ) -> Optional[pathlib.Path]:
        """Convert path arg to full filesystem path.

        If path is None, looks for file in current working directory and
        returns None if it is not there. An explicit path that does not point
        to an existing file is an error.
        """
        cwd = pathlib.Path.cwd()
        if path is None:
            full_path = cwd / default_file_name
            return full_path if full_path.is_file() else None
        full_path = path if path.is_absolute() else cwd / path
        if not full_path.exists():
            raise ConfigError(
                f"Config file {full_path} does not exist.",
                ConfigError.ErrorType.PATH_DOES_NOT_EXIST,
            )
        if not full_path.is_file():
            raise ConfigError(
                f"Config path {full_path} is not a file.",
                ConfigError.ErrorType.NOT_A_FILE,
            )
        return full_path

    def _read_config_file(self) -> None:
        """Read TOML configuration file."""
        if self.config_path is None:
            return
        app_settings = dataclasses.asdict(self)
        with open(self.config_path, "rb") as toml_file:
            file_settings = tomllib.load(toml_file)
        for setting_name, value in file_settings.items():
            if setting_name not in app_settings or setting_name == "config_path":
                continue
            if isinstance(value, str) and value.lower() in ["", "none", "null"]:
                continue
            setattr(self, setting_name, self._convert(setting_name, value))

    @staticmethod
    def _convert(setting_name: str, value: Any) -> Any:
        """Check a value from the config file and convert it to its setting type."""
        match setting_name:
            case "input_mode":
                try:
                    return InputMode(str(value).lower())
                except ValueError:
                    choices = ", ".join(mode.value for mode in InputMode)
                    raise ConfigError(
                        f"input_mode must be one of {choices}, not {value!r}.",
                        ConfigError.ErrorType.INVALID_VALUE,
                    ) from None
            case "show_date_info":
                if not isinstance(value, bool):
                    raise ConfigError(
                        f"show_date_info must be true or false, not {value!r}.",
                        ConfigError.ErrorType.INVALID_VALUE,
                    )
                return value
            case _:
                return value

    def create_new_config_file(self, config_path: pathlib.Path) -> None:
        """Create a new configuration file with default settings."""
        if not config_path.exists():
            shutil.copy(
                pathlib.Path(__file__).parent.parent / "example-config.toml",
                config_path,
            )


# Store settings in a module-level variable, which will be available from any
# other module that imports datecheck.model.config.
settings = Settings()
