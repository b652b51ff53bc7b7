"""Global pytest configuration for the intl test suite."""

import pytest

from intl.configuration import IntlSettings


@pytest.fixture
def intl_settings(tmp_path):
    """IntlSettings isolated from the environment and any .env file."""
    return IntlSettings(
        _env_file=None,
        DEFAULT_LOCALE="en-US",
        LOCALE=None,
        TRANSLATIONS_DIR=tmp_path,
        ENVIRONMENT="test",
    )
