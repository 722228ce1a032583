"""Logging utilities."""

# Pairing Rounds
# Copyright (C) 2025  Pairing Rounds developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from typing import Optional

from pairingrounds.constants import LOG_DIR_ENV, LOG_FILE_NAME, LOG_LEVEL_ENV

# the logger format used
LOG_FMT = "LVL: %(levelname)s | FILE PATH: %(pathname)s | FUN: %(funcName)s | msg: %(message)s | ln#:%(lineno)d"

PACKAGE_LOGGER = "pairingrounds"


def _level_from_env() -> int:
    """Read the log level name from the environment, WARNING if unset or unknown."""
    name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def _file_handler(formatter: logging.Formatter) -> Optional[RotatingFileHandler]:
    log_folder = os.environ.get(LOG_DIR_ENV)
    if not log_folder:
        return None
    try:
        os.makedirs(log_folder, exist_ok=True)
        handler = RotatingFileHandler(
            os.path.join(log_folder, LOG_FILE_NAME),
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    except OSError as e:
        print(f"Warning: could not open log file in {log_folder}: {e}", file=sys.stderr)
        return None
    handler.setFormatter(formatter)
    return handler


# --- Logging Setup ---
def setup_logger(logger_name: str) -> logging.Logger:
    """Set up logger for a python module.

    Sets up a console handler on stderr, and a rotating file handler when
    ``PAIRINGROUNDS_LOG_DIR`` is set.

    Parameters
    ----------
    logger_name : str
        The name for the logger, __name__ is idiomatic

    Returns
    -------
    logging.Logger
        the created logger
    """
    lgr = logging.getLogger(name=logger_name)
    lgr.setLevel(_level_from_env())
    # Remove any existing handlers on this logger to avoid duplicates
    for _h in list(lgr.handlers):
        lgr.removeHandler(_h)
    log_formatter = logging.Formatter(LOG_FMT)

    # Console Handler. stdout is reserved for command output.
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(log_formatter)
    lgr.addHandler(console_handler)

    file_handler = _file_handler(log_formatter)
    if file_handler:
        lgr.addHandler(file_handler)
    lgr.debug("logger %s initialized", logger_name)
    return lgr


def set_package_level(level: int) -> None:
    """Apply ``level`` to every logger created by :func:`setup_logger`."""
    for name, lgr in logging.root.manager.loggerDict.items():
        if isinstance(lgr, logging.Logger) and (
            name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")
        ):
            lgr.setLevel(level)
