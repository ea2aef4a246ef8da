"""jsonshape: print the structure of a JSON document."""

__version__ = "0.1.0"

from jsonshape.core.renderer import SchemaRenderer, render_to_string
from jsonshape.models.options import RenderOptions, TokenFlavor, EmptyObjectPolicy

__all__ = [
    "SchemaRenderer",
    "render_to_string",
    "RenderOptions",
    "TokenFlavor",
    "EmptyObjectPolicy",
]
