"""File-backed dictionary loaders.

Expects files named <domain>.<locale>.yml (or .yaml / .json) in a
translations directory. All files of one locale are merged by top-level
namespace into a single dictionary.
"""

import asyncio
import json
from pathlib import Path
from typing import Any, Awaitable, Dict, List

import yaml

from intl.i18n.models import DeferredSource, LocaleId
from intl.logging import get_module_logger

logger = get_module_logger()

SUFFIXES = (".yml", ".yaml", ".json")


def _locale_of(path: Path) -> str:
    # "incident.en-US.yml" -> "en-US", "en-US.json" -> "en-US"
    return path.stem.split(".")[-1]


class FileDictionaryLoader:
    """Zero-argument loader reading every dictionary file for one locale.

    Calling the loader returns an awaitable; file I/O runs in a worker
    thread.

    Attributes:
        translations_dir: Directory containing translation files.
        locale: Locale whose files are read.
    """

    def __init__(self, translations_dir: Path, locale: LocaleId):
        self.translations_dir = Path(translations_dir)
        self.locale = locale

    def __repr__(self) -> str:
        return f"FileDictionaryLoader({str(self.translations_dir)!r}, {self.locale!r})"

    def __call__(self) -> Awaitable[Dict[str, Any]]:
        return asyncio.to_thread(self.load)

    def files(self) -> List[Path]:
        """Files for this locale, sorted by name."""
        return sorted(
            path
            for path in self.translations_dir.iterdir()
            if path.suffix in SUFFIXES and _locale_of(path) == self.locale
        )

    def load(self) -> Dict[str, Any]:
        """Read and merge all files for the locale.

        Raises:
            FileNotFoundError: If no file exists for the locale.
            ValueError: If a file cannot be parsed or is not a mapping.
        """
        files = self.files()
        if not files:
            raise FileNotFoundError(
                f"No translation files found for locale {self.locale} in {self.translations_dir}"
            )

        merged: Dict[str, Any] = {}
        for path in files:
            data = _parse(path)
            if data is None:
                continue
            if not isinstance(data, dict):
                logger.warning("invalid_dictionary_format", file=str(path), expected="dict")
                raise ValueError(f"{path} must contain a mapping at the top level")
            for namespace, messages in data.items():
                existing = merged.get(namespace)
                if isinstance(existing, dict) and isinstance(messages, dict):
                    existing.update(messages)
                else:
                    merged[namespace] = messages

        logger.info(
            "loaded_dictionary_files",
            locale=self.locale,
            file_count=len(files),
            namespace_count=len(merged),
        )
        return merged


def _parse(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        try:
            if path.suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as e:
            logger.error("dictionary_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e


def discover_sources(translations_dir: Path) -> Dict[LocaleId, DeferredSource]:
    """Declare a deferred source for each locale found in a directory.

    Args:
        translations_dir: Directory with <domain>.<locale>.<ext> files.

    Returns:
        Dict mapping locale to a DeferredSource wrapping FileDictionaryLoader.

    Raises:
        ValueError: If the directory does not exist.
    """
    translations_dir = Path(translations_dir)
    if not translations_dir.is_dir():
        raise ValueError(f"Translations directory not found: {translations_dir}")

    locales = sorted(
        {
            _locale_of(path)
            for path in translations_dir.iterdir()
            if path.suffix in SUFFIXES
        }
    )
    logger.info(
        "discovered_dictionary_sources",
        translations_dir=str(translations_dir),
        locales=locales,
    )
    return {
        locale: DeferredSource(FileDictionaryLoader(translations_dir, locale))
        for locale in locales
    }
