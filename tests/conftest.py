"""Shared fixtures."""

from __future__ import annotations

import pytest

from tests.helpers import ScriptedTransport


@pytest.fixture
def transport() -> ScriptedTransport:
    return ScriptedTransport()
