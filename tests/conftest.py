from __future__ import annotations

import logging

import pytest

import aoc.config as config


@pytest.fixture(autouse=True)
def _reset_runtime_state():
    """Undo width/color overrides and CLI logging setup between tests."""
    yield
    config._reset()
    logger = logging.getLogger("aoc")
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
