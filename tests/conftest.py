"""
Pytest configuration and shared fixtures for workflow tests.
"""

import logging

import pytest

from draftmachine import Document, WorkflowSettings
from tests.framework import WorkflowDsl


@pytest.fixture
def document():
    """A fresh document with default settings."""
    return Document()


@pytest.fixture
def strict_document():
    """A fresh document that raises on operations its state does not accept."""
    return Document(WorkflowSettings(strict=True))


@pytest.fixture
def workflow():
    """Workflow DSL over a document with default settings."""
    return WorkflowDsl()


@pytest.fixture
def debug_logs(caplog):
    """Capture DEBUG records from the draftmachine loggers."""
    caplog.set_level(logging.DEBUG, logger="draftmachine")
    return caplog
