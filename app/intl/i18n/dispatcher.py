"""Content dispatch for tagged translation values.

A value such as "[markdown]# Title" is routed to the renderer registered for
its tag. Detection is anchored at the start of the string.
"""

import re
from typing import Any, Mapping, Optional

from intl.i18n.exceptions import UnregisteredRendererError
from intl.i18n.models import ContentType, Renderer, TaggedContent
from intl.i18n.registry import LocaleRegistry
from intl.logging import get_module_logger

logger = get_module_logger()

TAG_PATTERN = re.compile(
    r"\[({})\](.*)".format("|".join(re.escape(t.value) for t in ContentType)),
    re.DOTALL,
)


def parse_tagged(value: Any) -> Optional[TaggedContent]:
    """Split a `[tag]body` string, or return None for anything else."""
    if not isinstance(value, str):
        return None
    match = TAG_PATTERN.match(value)
    if match is None:
        return None
    return TaggedContent(content_type=ContentType(match.group(1)), body=match.group(2))


class ContentDispatcher:
    """Routes tagged strings to renderers from the registry."""

    def __init__(self, registry: LocaleRegistry):
        self.registry = registry

    def dispatch(
        self,
        value: Any,
        renderer: Optional[Renderer] = None,
        renderer_props: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        """Render value if it is tagged content, else return it as plain text.

        Args:
            value: Resolved (and interpolated) translation value.
            renderer: Optional override used instead of the registry.
            renderer_props: Extra keyword arguments for the renderer.

        Returns:
            Renderer output, or value unchanged.

        Raises:
            UnregisteredRendererError: If value is tagged, no override was
                given and no renderer is registered for the tag.
        """
        if not isinstance(value, str):
            return value

        tagged = parse_tagged(value)
        if tagged is not None:
            handler = renderer or self.registry.renderer_for(tagged.content_type)
            if handler is None:
                logger.error(
                    "unregistered_renderer",
                    content_type=tagged.content_type.value,
                )
                raise UnregisteredRendererError(tagged.content_type.value)
            return _render(handler, tagged.body, renderer_props)

        if renderer is not None:
            return _render(renderer, value, renderer_props)

        return value


def _render(
    renderer: Renderer, content: str, renderer_props: Optional[Mapping[str, Any]]
) -> Any:
    # A "content" prop overrides the resolved body
    props = {"content": content, **(renderer_props or {})}
    return renderer(props.pop("content"), **props)
