"""INI-format configuration file for the contain-exactly command"""


import configparser
from typing import Callable, NamedTuple

from .exception import ConfigurationError


DEFAULT_CONFIG_FILE = "/etc/contain-exactly.conf"

CONFIG_SECTION = "contain-exactly"


class Settings(NamedTuple):
    """Options which influence how two collections are compared"""

    # Try the cheap sort-then-compare check before searching for pairings
    sorted_shortcut: bool = True

    # Treat top-level expected strings of the form /regex/ as patterns
    patterns: bool = False


def load_settings(config_file: str = DEFAULT_CONFIG_FILE,
                  required: bool = False,
                  open_func: Callable = open) -> Settings:
    """Read Settings from the [contain-exactly] section of an INI file

    A missing file (or a file without the section) just produces the
    defaults, unless the caller explicitly required the file to exist. Any
    other problem reading the file, or an option which isn't a boolean, is
    reported as a ConfigurationError.
    """

    parser = configparser.ConfigParser()
    try:
        with open_func(config_file, "r") as config_f:
            parser.read_file(config_f, source=config_file)
    except FileNotFoundError as err:
        if required:
            raise ConfigurationError(f"Configuration file {config_file} "
                                     f"does not exist") from err
        return Settings()
    except (OSError, configparser.Error) as err:
        raise ConfigurationError(f"Could not read configuration file "
                                 f"{config_file}: {err}") from err

    if not parser.has_section(CONFIG_SECTION):
        return Settings()

    defaults = Settings()
    try:
        return Settings(
            sorted_shortcut=parser.getboolean(CONFIG_SECTION,
                                              'sorted_shortcut',
                                              fallback=defaults.sorted_shortcut),
            patterns=parser.getboolean(CONFIG_SECTION,
                                       'patterns',
                                       fallback=defaults.patterns)
        )
    except ValueError as err:
        raise ConfigurationError(f"Invalid value in configuration file "
                                 f"{config_file}: {err}") from err
