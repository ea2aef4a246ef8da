"""Rendering options."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


DEFAULT_INDENT = 2


class TokenFlavor(str, Enum):
    """How leaf type names are written."""
    BARE = "bare"      # string, number, boolean
    QUOTED = "quoted"  # "string", "number", "boolean"


class EmptyObjectPolicy(str, Enum):
    """How an object with no keys is written."""
    COLLAPSED = "collapsed"  # {}
    EXPANDED = "expanded"    # {\n<indent>}


class RenderOptions(BaseModel):
    """Options controlling schema output.

    The defaults produce two-space indentation, bare leaf tokens,
    collapsed empty objects and keys in document order.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)

    indent: int = Field(default=DEFAULT_INDENT, ge=0, description="Indent characters per nesting level")
    indent_char: str = Field(default=" ", description="Character repeated to build one indent level")
    flavor: TokenFlavor = TokenFlavor.BARE
    empty_objects: EmptyObjectPolicy = EmptyObjectPolicy.COLLAPSED
    sort_keys: bool = False

    @field_validator("indent_char")
    @classmethod
    def _single_whitespace(cls, v: str) -> str:
        if v not in (" ", "\t"):
            raise ValueError("indent_char must be a single space or tab character")
        return v

    @property
    def indent_unit(self) -> str:
        """Indentation string for one nesting level."""
        return self.indent_char * self.indent
