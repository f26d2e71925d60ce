"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Configure logging for tests to be minimal."""
    os.environ['COLLECTION_EXTENSIONS_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    for logger_name in ['collection_extensions.guard.checks', 'collection_extensions.iterate.multiple']:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
