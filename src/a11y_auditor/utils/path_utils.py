# src/a11y_auditor/utils/path_utils.py
import logging
import os
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

SETTINGS_ENV_VAR = "A11Y_AUDITOR_SETTINGS"


class PathUtils:
    """
    A central utility for reliably retrieving important package and user paths.
    """

    @staticmethod
    def get_package_root() -> Path:
        """Returns the directory of the installed `a11y_auditor` package."""
        return Path(__file__).resolve().parent.parent

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_package_root() / "settings.json"

    @staticmethod
    def get_user_settings_file() -> Optional[Path]:
        """
        Returns the optional user override file named by the A11Y_AUDITOR_SETTINGS
        environment variable, or None when it is unset.
        """
        value = os.environ.get(SETTINGS_ENV_VAR)
        if not value:
            return None
        return Path(value).expanduser()
