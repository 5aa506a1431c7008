"""Document rendering — renderer port, template contexts and the text renderer."""

from simplestore.rendering.port import RenderError, TemplateRenderer
from simplestore.rendering.renderer import TextRenderer

__all__ = ["RenderError", "TemplateRenderer", "TextRenderer"]
