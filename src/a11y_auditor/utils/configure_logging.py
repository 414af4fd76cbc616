import logging
import sys
from typing import Dict, Optional, Union

from tqdm import tqdm

from a11y_auditor.managers.config_manager import config_manager

Level = Union[str, int]


class LogWithTqdm(logging.Handler):
    """
    A logging handler that redirects output to `tqdm.write()`, so log lines
    emitted by batch workers do not break the progress bar.
    """
    def emit(self, record):
        try:
            msg = self.format(record)
            tqdm.write(msg, file=sys.stderr)
            self.flush()
        except Exception:
            self.handleError(record)


def _to_level(level: Level, fallback: int) -> int:
    if isinstance(level, str):
        return getattr(logging, level.upper(), fallback)
    return level


def configure_logger(
        general_level: Optional[Level] = None,
        module_specific_levels: Optional[Dict[str, Level]] = None,
        silenced_loggers: Optional[Dict[str, Level]] = None
) -> None:
    """
    Configures the root logger and specific module loggers with a
    tqdm-friendly handler. Unset arguments fall back to the `logging.*`
    entries of the configuration.
    """
    if general_level is None:
        general_level = config_manager.get_nested("logging.level", "WARNING")
    if module_specific_levels is None:
        module_specific_levels = config_manager.get_nested("logging.module_levels", {})
    if silenced_loggers is None:
        silenced_loggers = config_manager.get_nested("logging.silenced", {})

    handler = LogWithTqdm()
    handler.setFormatter(logging.Formatter(
        "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] - %(message)s"
    ))

    root_logger = logging.getLogger()
    root_logger.setLevel(_to_level(general_level, logging.INFO))
    root_logger.handlers.clear()
    root_logger.addHandler(handler)

    for name, level in module_specific_levels.items():
        logging.getLogger(name).setLevel(_to_level(level, logging.INFO))

    # Muzzle noisy loggers by setting their level high
    for name, level in silenced_loggers.items():
        logging.getLogger(name).setLevel(_to_level(level, logging.CRITICAL))
