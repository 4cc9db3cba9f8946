"""Shared helpers for Court Rotation: logging setup and id generation."""

# Court Rotation
# Copyright (C) 2025  Court Rotation developers
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
import uuid

from courtrotation.constants import LOG_FORMAT, LOG_LEVEL_ENV_VAR, PACKAGE_LOGGER

_configured = False


def _configure_package_logger() -> None:
    """Attach a single stream handler to the package root logger."""
    global _configured
    if _configured:
        return

    root = logging.getLogger(PACKAGE_LOGGER)
    level_name = os.environ.get(LOG_LEVEL_ENV_VAR, "WARNING").upper()
    root.setLevel(getattr(logging, level_name, logging.WARNING))

    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    _configured = True


def setup_logger(name: str) -> logging.Logger:
    """Return a module logger that propagates to the package logger.

    Args:
        name: Usually ``__name__`` of the calling module

    Returns:
        Configured logger instance
    """
    _configure_package_logger()
    return logging.getLogger(name)


def generate_id(prefix: str = "") -> str:
    """Generate a unique identifier, optionally prefixed by a type name."""
    unique = uuid.uuid4().hex[:12]
    return f"{prefix.lower()}_{unique}" if prefix else unique
