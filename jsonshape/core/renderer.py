"""Render the structural schema of a decoded JSON document.

Every leaf is replaced by its type name and arrays are represented by
their first element only:

    {"a": 1, "b": ["x", "y"]}

renders as

    {
      "a": number,
      "b": [
        string
      ]
    }
"""

import io
import json
import logging
from typing import Any, Optional, TextIO

from jsonshape.core.exceptions import WriteError
from jsonshape.models.kinds import JsonKind, classify, type_name
from jsonshape.models.options import EmptyObjectPolicy, RenderOptions, TokenFlavor

logger = logging.getLogger(__name__)


class SchemaRenderer:
    """Writes the schema of a JSON value to a text sink as it walks the value.

    The renderer keeps no state between calls besides its sink and options,
    so one instance can render any number of documents.
    """

    def __init__(self, sink: TextIO, options: Optional[RenderOptions] = None):
        self.sink = sink
        self.options = options or RenderOptions()

    def render(self, value: Any, level: int = 0) -> None:
        """Write the schema of ``value`` as if it starts at ``level``.

        No trailing newline is written for the value itself.

        Raises:
            WriteError: If the sink rejects a write. Output already written
                is left in place.
        """
        kind = classify(value)

        if kind is JsonKind.NULL:
            self._write("null")
        elif kind is JsonKind.OBJECT:
            self._render_object(value, level)
        elif kind is JsonKind.ARRAY:
            self._render_array(value, level)
        elif kind is JsonKind.UNKNOWN:
            logger.debug(f"Unrecognized value type at level {level}: {type_name(value)}")
            self._write(f"unknown ({type_name(value)})")
        else:
            self._write(self.leaf_token(kind))

    def render_document(self, value: Any) -> None:
        """Write the schema of a whole document, one trailing newline, and flush."""
        self.render(value)
        self._write("\n")
        try:
            self.sink.flush()
        except OSError as e:
            raise WriteError(f"Failed to write output: {e}") from e

    def leaf_token(self, kind: JsonKind) -> str:
        """Type token for a string, number or boolean leaf."""
        if self.options.flavor is TokenFlavor.QUOTED:
            return f'"{kind.value}"'
        return kind.value

    def _render_object(self, obj: dict, level: int) -> None:
        if not obj:
            if self.options.empty_objects is EmptyObjectPolicy.EXPANDED:
                self._write("{\n" + self._indent(level) + "}")
            else:
                self._write("{}")
            return

        keys = sorted(obj) if self.options.sort_keys else list(obj)
        self._write("{\n")
        for i, key in enumerate(keys):
            self._write(f"{self._indent(level + 1)}{json.dumps(key, ensure_ascii=False)}: ")
            self.render(obj[key], level + 1)
            if i < len(keys) - 1:
                self._write(",")
            self._write("\n")
        self._write(self._indent(level) + "}")

    def _render_array(self, arr: list, level: int) -> None:
        self._write("[\n")
        # The first element stands in for the whole array
        if arr:
            self._write(self._indent(level + 1))
            self.render(arr[0], level + 1)
            self._write("\n")
        self._write(self._indent(level) + "]")

    def _indent(self, level: int) -> str:
        return self.options.indent_unit * level

    def _write(self, text: str) -> None:
        try:
            self.sink.write(text)
        except (OSError, UnicodeEncodeError) as e:
            raise WriteError(f"Failed to write output: {e}") from e


def render_to_string(value: Any, options: Optional[RenderOptions] = None) -> str:
    """Render the schema of ``value`` into a string (no trailing newline)."""
    buffer = io.StringIO()
    SchemaRenderer(buffer, options).render(value)
    return buffer.getvalue()
