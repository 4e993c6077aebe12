"""Locate the picup home directory."""

import os
from pathlib import Path

from ..constants import PICUP_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Return the picup home directory, or ``parts`` joined under it.

    ``$PICUP_HOME`` wins when set; otherwise ``$HOME/.picup``.

    >>> get_home_dir("config.json")  # doctest: +SKIP
    PosixPath('/home/me/.picup/config.json')
    """
    override = os.environ.get("PICUP_HOME")
    if override:
        home = Path(override).expanduser().resolve()
    else:
        user_home = os.environ.get("HOME")
        home = (Path(user_home) if user_home else Path.home()) / PICUP_HOME_EXT
    return home.joinpath(*parts)
