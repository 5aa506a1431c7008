"""Plain-text renderer backed by the template registry."""

import structlog

from simplestore.rendering.port import RenderError, TemplateRenderer
from simplestore.rendering.templates import get_template

logger = structlog.get_logger(__name__)


class TextRenderer(TemplateRenderer):
    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding

    def render(self, name: str, context) -> bytes:
        try:
            template_cls = get_template(name)
            return template_cls.render(context).encode(self.encoding)
        except Exception as exc:
            logger.error("Template execution failed", template=name, error=str(exc))
            raise RenderError(f"unable to execute {name} template: {exc}") from exc
