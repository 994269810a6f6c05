"""
Shared fixtures for the hospital billing tests.
"""

import io
import logging

import pytest

from hospitalbilling.session import BillingSession


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo any handlers or level set by setup_logger during a test."""
    yield
    logger = logging.getLogger('hospitalbilling')
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def run_session():
    """Run a session on the given input lines and return (result, output)."""
    def _run(*lines):
        stdin = io.StringIO("".join(f"{line}\n" for line in lines))
        stdout = io.StringIO()
        result = BillingSession(stdin=stdin, stdout=stdout).run()
        return result, stdout.getvalue()

    return _run
