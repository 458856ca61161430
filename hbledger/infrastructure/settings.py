"""Settings helpers for locating the HomeBank ledger file."""

from dataclasses import dataclass
import os
from pathlib import Path
import tomllib
from typing import Optional

from hbledger.infrastructure.logging.logger import get_app_logger
from hbledger.utils.utils import get_project_root

APP_NAME = "hb"


class ConfigError(Exception):
    """The configuration file could not provide a ledger path."""

    reason = "is invalid"

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(self._message())

    def _message(self) -> str:
        return f"Configuration file `{self.path}` {self.reason}."


class ConfigNotFoundError(ConfigError):
    reason = "does not exist"


class ConfigNotAFileError(ConfigError):
    reason = "is not a file"


class ConfigParseError(ConfigError):
    reason = "could not be parsed"


class MissingLedgerPathError(ConfigError):
    reason = "does not define a `path` to the HomeBank file"


class LedgerFileNotFoundError(ConfigError):
    """The configured HomeBank file does not exist."""

    def _message(self) -> str:
        return f"HomeBank file `{self.path}` does not exist."


def default_config_dir() -> Path:
    """Return the per-user configuration directory of the tool."""
    base = os.getenv("XDG_CONFIG_HOME")
    root = Path(base) if base else Path.home() / ".config"
    return root / APP_NAME


def default_config_file() -> Path:
    return default_config_dir() / "config.toml"


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for loading the ledger.

    Attributes:
        ledger_file: Path to the HomeBank ``.xhb`` file, when known.
        config_file: Configuration file the path came from, if any.
    """

    ledger_file: Optional[Path] = None
    config_file: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from the environment.

        ``HOMEBANK_FILE`` wins; otherwise the config file named by
        ``HB_CONFIG`` (or the default one, when it exists) is read;
        otherwise a single ``*.xhb`` under ``data/`` is used.

        Returns:
            LedgerSettings: Settings sourced from the environment.

        Raises:
            ConfigError: If an explicitly named config file is unusable.
        """
        logger = get_app_logger()
        raw_file = os.getenv("HOMEBANK_FILE")
        if raw_file:
            return cls(ledger_file=cls._normalize_path(raw_file, logger))

        raw_config = os.getenv("HB_CONFIG")
        if raw_config:
            return cls.from_config_file(Path(raw_config).expanduser())
        config_file = default_config_file()
        if config_file.is_file():
            return cls.from_config_file(config_file)

        return cls(ledger_file=cls._default_ledger_file(logger))

    @classmethod
    def from_config_file(cls, path: Path | str) -> "LedgerSettings":
        """Read the ledger path from a TOML configuration file.

        Relative ledger paths resolve against the config file directory.

        Raises:
            ConfigNotFoundError: If the config file does not exist.
            ConfigNotAFileError: If the config path is not a regular file.
            ConfigParseError: If the file is not valid TOML.
            MissingLedgerPathError: If no ``path`` key is present.
            LedgerFileNotFoundError: If the configured ledger is missing.
        """
        config_path = Path(path)
        if not config_path.exists():
            raise ConfigNotFoundError(config_path)
        if not config_path.is_file():
            raise ConfigNotAFileError(config_path)
        try:
            with config_path.open("rb") as handle:
                data = tomllib.load(handle)
        except (OSError, tomllib.TOMLDecodeError) as exc:
            raise ConfigParseError(config_path) from exc

        raw_ledger = data.get("path")
        if not isinstance(raw_ledger, str) or not raw_ledger.strip():
            raise MissingLedgerPathError(config_path)
        ledger_file = Path(raw_ledger).expanduser()
        if not ledger_file.is_absolute():
            ledger_file = config_path.parent / ledger_file
        ledger_file = ledger_file.resolve()
        if not ledger_file.exists():
            raise LedgerFileNotFoundError(ledger_file)
        return cls(ledger_file=ledger_file, config_file=config_path)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the ledger file path.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"HomeBank file does not exist at {path}")
        return path

    @staticmethod
    def _default_ledger_file(logger) -> Path | None:
        """Return a default ledger path when available.

        Args:
            logger: Logger used for warnings.

        Returns:
            Path | None: Default path if a single file is found in data/.
        """
        data_dir = get_project_root() / "data"
        if not data_dir.exists():
            return None
        matches = sorted(data_dir.glob("*.xhb"))
        if len(matches) == 1:
            return matches[0].resolve()
        if len(matches) > 1:
            logger.warning(
                "Multiple .xhb files found in data/. "
                "Set HOMEBANK_FILE to choose one."
            )
        return None


__all__ = [
    "LedgerSettings",
    "ConfigError",
    "ConfigNotFoundError",
    "ConfigNotAFileError",
    "ConfigParseError",
    "MissingLedgerPathError",
    "LedgerFileNotFoundError",
    "default_config_dir",
    "default_config_file",
]
