"""Logging channel for validation warnings.

Warnings about substituted defaults go to the ``"validation"`` logger. The
library only attaches a ``NullHandler``; applications decide where the
records end up.

Example:
    ```python
    import logging
    from dataknobs_typecheck.log import configure_logging

    logging.basicConfig()
    configure_logging("ERROR")  # silence default-substitution warnings
    ```
"""

import logging
from typing import Any

LOG_CHANNEL = "validation"

log = logging.getLogger(LOG_CHANNEL)
log.addHandler(logging.NullHandler())


def configure_logging(
    level: int | str | None = None, settings: Any = None
) -> logging.Logger:
    """Set the level of the validation channel.

    Args:
        level: Logging level as int or name (e.g. ``"WARNING"``); ``None``
            falls back to ``settings``
        settings: Object with a ``log_level`` attribute, usually a
            ``TypecheckSettings``; used only when ``level`` is ``None``.
            With neither, the current level is left untouched

    Returns:
        The validation logger
    """
    if level is None and settings is not None:
        level = getattr(settings, "log_level", None)
    if level is not None:
        if isinstance(level, str):
            level = level.upper()
        log.setLevel(level)
    return log


__all__ = ["LOG_CHANNEL", "log", "configure_logging"]
