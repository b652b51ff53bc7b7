"""Feature-level fixtures for i18n engine tests."""

import json

import pytest
import yaml

from intl.i18n import LocaleRegistry, Translator
from tests.factories.i18n import (
    CountingLoader,
    RecordingRenderer,
    make_dictionary,
)


@pytest.fixture
def en_dictionary():
    return make_dictionary("en-US")


@pytest.fixture
def fr_dictionary():
    return make_dictionary("fr-FR")


@pytest.fixture
def fr_loader(fr_dictionary):
    """Async loader for fr-FR that counts invocations."""
    return CountingLoader(fr_dictionary)


@pytest.fixture
def markdown_renderer():
    return RecordingRenderer("markdown")


@pytest.fixture
def registry(en_dictionary, fr_loader, markdown_renderer):
    """Registry with a concrete en-US dictionary and a deferred fr-FR loader."""
    return LocaleRegistry(
        dictionaries={"en-US": en_dictionary, "fr-FR": fr_loader},
        default_locale="en-US",
        renderers={"markdown": markdown_renderer},
    )


@pytest.fixture
def translator(registry):
    return Translator(registry)


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create a directory with sample translation files.

    - common.en-US.yml
    - nav.en-US.json
    - common.fr-FR.yml
    """
    with open(tmp_path / "common.en-US.yml", "w", encoding="utf-8") as f:
        yaml.dump({"greeting": {"hello": "Hello, ${name}!"}}, f)
    with open(tmp_path / "nav.en-US.json", "w", encoding="utf-8") as f:
        json.dump({"nav": {"home": "Home"}}, f)
    with open(tmp_path / "common.fr-FR.yml", "w", encoding="utf-8") as f:
        yaml.dump({"greeting": {"hello": "Bonjour, ${name}!"}}, f, allow_unicode=True)
    return tmp_path
