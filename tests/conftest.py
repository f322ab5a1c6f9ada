"""
Shared fixtures for core tests

PURPOSE: Provide scripted providers to workflow and UI tests.
"""

import pytest

from tests.fakes import ScriptedProvider


@pytest.fixture
def provider():
    """Provider that succeeds immediately"""
    return ScriptedProvider()


@pytest.fixture
def blocking_provider():
    """Provider that waits for `release` before answering"""
    provider = ScriptedProvider(blocking=True)
    yield provider
    provider.release.set()
