"""Test data factories for the i18n engine.

Provides deterministic builders for:
- translation dictionaries
- counting loaders (sync, async, failing, gated)
- registries and translators
"""

import asyncio
from typing import Any, Callable, Dict, List, Optional


def make_dictionary(locale: str = "en-US") -> Dict[str, Any]:
    """Create a nested translation dictionary for a locale."""
    if locale == "fr-FR":
        return {
            "greeting": {"hello": "Bonjour, ${name}!"},
            "nav": {},
            "help": {"body": "[markdown]# Aide"},
        }
    return {
        "greeting": {
            "hello": "Hello, ${name}!",
            "bye": "Goodbye",
        },
        "nav": {"home": "Home", "settings": "Settings"},
        "help": {"body": "[markdown]# Help"},
        "logo": "[svg]<svg/>",
        "items": ["first", "second"],
    }


class CountingLoader:
    """Zero-argument async loader that records each invocation.

    Attributes:
        value: Dictionary returned on success.
        calls: Number of invocations.
        gate: Optional event the loader waits on before returning.
        failures: Number of leading calls that raise.
    """

    def __init__(
        self,
        value: Optional[Dict[str, Any]] = None,
        gate: Optional[asyncio.Event] = None,
        failures: int = 0,
        error: Optional[Exception] = None,
    ):
        self.value = value if value is not None else make_dictionary()
        self.gate = gate
        self.failures = failures
        self.error = error or ConnectionError("network down")
        self.calls = 0

    async def _load(self) -> Dict[str, Any]:
        if self.gate is not None:
            await self.gate.wait()
        if self.calls <= self.failures:
            raise self.error
        return self.value

    def __call__(self):
        self.calls += 1
        return self._load()


class SyncCountingLoader:
    """Zero-argument loader returning the dictionary synchronously."""

    def __init__(self, value: Optional[Dict[str, Any]] = None):
        self.value = value if value is not None else make_dictionary()
        self.calls = 0

    def __call__(self) -> Dict[str, Any]:
        self.calls += 1
        return self.value


class RecordingRenderer:
    """Renderer that records every call and returns a tuple."""

    def __init__(self, name: str = "renderer"):
        self.name = name
        self.calls: List[Dict[str, Any]] = []

    def __call__(self, content: str, **props: Any):
        self.calls.append({"content": content, **props})
        return (self.name, content, props)


def make_renderers(**overrides: Callable[..., Any]) -> Dict[str, Callable[..., Any]]:
    """Create a renderer registry with a markdown renderer by default."""
    renderers: Dict[str, Callable[..., Any]] = {"markdown": RecordingRenderer("markdown")}
    renderers.update(overrides)
    return renderers
