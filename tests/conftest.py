"""Test configuration for pytest."""

import logging
import os
import pytest


@pytest.fixture(autouse=True)
def configure_test_logging():
    """Keep typofixer logging quiet during tests."""
    os.environ['TYPOFIXER_LOG_LEVEL'] = 'WARNING'

    logging.getLogger().setLevel(logging.WARNING)

    for logger_name in ['typofixer.fixer', 'typofixer.table.loader', 'typofixer.output.report']:
        logging.getLogger(logger_name).setLevel(logging.ERROR)


@pytest.fixture
def blog_table():
    """The table from the variable typo rule examples."""
    from typofixer.table.model import LookupTable

    return LookupTable.build({
        "previous": ["previuos", "previuous"],
        "beginning": ["begining", "beginign"],
        "statement": ["statment"],
    })
