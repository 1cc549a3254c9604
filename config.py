"""Stylesheet location for oxishut.

The user stylesheet lives in `$XDG_CONFIG_HOME/oxishut/style.css` and is
created with a small default the first time the menu runs.
"""
import logging
import os
from typing import Optional

from gi.repository import GLib

from power_menu.errors import ConfigError

logger = logging.getLogger(__name__)

APP_NAME = "oxishut"
STYLE_FILE = "style.css"
DEFAULT_STYLESHEET = """#mainwindow {
    border-radius: 10px;
}
"""


def config_dir(base: Optional[str] = None) -> str:
    return os.path.join(base or GLib.get_user_config_dir(), APP_NAME)


def ensure_style_file(base: Optional[str] = None) -> str:
    """Return the user stylesheet path, creating it with defaults if missing."""
    directory = config_dir(base)
    try:
        os.makedirs(directory, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"could not create config directory {directory}: {e}") from e

    path = os.path.join(directory, STYLE_FILE)
    if not os.path.exists(path):
        try:
            with open(path, "w") as f:
                f.write(DEFAULT_STYLESHEET)
        except OSError as e:
            raise ConfigError(f"could not create css config file {path}: {e}") from e
        logger.info("created default stylesheet at %s", path)
    return path


def resolve_style_path(css_arg: Optional[str], base: Optional[str] = None) -> str:
    """`--css` wins when given; an empty value means no stylesheet."""
    if css_arg is not None:
        return css_arg
    return ensure_style_file(base)
