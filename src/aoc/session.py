"""Session cookie discovery."""

from __future__ import annotations

import logging
import os
import pathlib
import string
from collections.abc import Mapping

from aoc.config import (
    HIDDEN_SESSION_COOKIE_FILE,
    SESSION_COOKIE_ENV_VAR,
    SESSION_COOKIE_FILE,
    get_config_dir,
)
from aoc.errors import InvalidSessionCookie, SessionFileNotFound, SessionFileReadError

log = logging.getLogger(__name__)

_HEX_DIGITS = frozenset(string.hexdigits)


def validate_session_cookie(raw: str) -> str:
    cookie = raw.strip()
    if not cookie or not set(cookie) <= _HEX_DIGITS:
        raise InvalidSessionCookie()
    return cookie


def read_session_file(path: pathlib.Path) -> str:
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as err:
        raise SessionFileReadError(str(path), str(err)) from err
    log.debug("Loading session cookie from '%s'", path)
    return validate_session_cookie(raw)


def default_session_files() -> list[pathlib.Path]:
    return [
        pathlib.Path.home() / HIDDEN_SESSION_COOKIE_FILE,
        get_config_dir() / SESSION_COOKIE_FILE,
    ]


def load_session_cookie(
    path: str | pathlib.Path | None = None,
    *,
    environ: Mapping[str, str] = os.environ,
) -> str:
    """Return the session cookie from *path*, the environment or a default file."""
    if path is not None:
        return read_session_file(pathlib.Path(path).expanduser())

    cookie = environ.get(SESSION_COOKIE_ENV_VAR)
    if cookie is not None:
        if cookie.strip():
            log.debug("Loading session cookie from '%s' environment variable", SESSION_COOKIE_ENV_VAR)
            return validate_session_cookie(cookie)
        log.warning("Environment variable '%s' is set but it is empty, ignoring", SESSION_COOKIE_ENV_VAR)

    for candidate in default_session_files():
        if candidate.is_file():
            return read_session_file(candidate)
    raise SessionFileNotFound()
