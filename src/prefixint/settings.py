import logging
import os
from pathlib import Path

try:
    import tomllib
except ModuleNotFoundError:
    import tomli as tomllib  # pyright: ignore[reportMissingImports]


# Environment variable naming the settings file when no path is given
SETTINGS_ENV = 'PREFIXINT_SETTINGS'

# Settings key constants
SETTING_LOGGING_PATH = 'logging.path'
SETTING_LOGGING_LEVEL = 'logging.level'

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class Settings:
    """Read-only view of a TOML settings file.

    The file is located by the path argument, or by the PREFIXINT_SETTINGS
    environment variable when no path is given. A missing file is not an error:
    settings are empty and every get() call returns its default.

    Example:
        settings = Settings('prefixint.toml')
        log_path = settings.get(SETTING_LOGGING_PATH)
        level = settings.get(SETTING_LOGGING_LEVEL, 'INFO')
    """

    def __init__(self, path: str | os.PathLike | None = None):
        """Load settings.

        Args:
            path: Settings file; defaults to $PREFIXINT_SETTINGS

        Raises:
            tomllib.TOMLDecodeError: Settings file is not valid TOML
        """
        if path is None:
            path = os.environ.get(SETTINGS_ENV)

        self._path = Path(path) if path is not None else None
        self._settings = {}

        if self._path is not None and self._path.is_file():
            with open(self._path, 'rb') as f:
                self._settings = tomllib.load(f)

    @property
    def path(self) -> Path | None:
        return self._path

    def get(self, key: str, default=None):
        """Get a setting value by dot-separated key path.

        'logging.path' accesses settings['logging']['path']. Returns the default
        if the key path does not exist or an intermediate value is not a table.

        Examples:
            >>> settings.get(SETTING_LOGGING_LEVEL, 'INFO')
            'DEBUG'
            >>> settings.get('nonexistent.key', 'fallback')
            'fallback'
        """
        value = self._settings

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value


def configure_logging_from_settings(settings: Settings) -> bool:
    """Send log records to the file named by logging.path, if set.

    Keeps the current root level when one is already configured (e.g. by an
    application), otherwise uses logging.level, defaulting to INFO. Setting
    logging.level to DEBUG enables per-value encoder traces.

    Returns:
        True if logging was configured, False otherwise

    Raises:
        ValueError: logging.level is not a known level name
    """
    log_path = settings.get(SETTING_LOGGING_PATH)
    if not log_path:
        return False

    if logging.root.level != logging.NOTSET and logging.root.handlers:
        level = logging.root.level
    else:
        level_name = str(settings.get(SETTING_LOGGING_LEVEL, 'INFO')).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise ValueError(f"Unknown logging level: {level_name}")

    for handler in logging.root.handlers[:]:
        logging.root.removeHandler(handler)
        handler.close()

    logging.basicConfig(filename=str(log_path), level=level, format=LOG_FORMAT)
    return True
