import io
import logging
import os
import sys

import click
from dotenv import load_dotenv

from jsonshape import __version__
from jsonshape.config.loader import load_config
from jsonshape.core.document import load_document, open_input
from jsonshape.core.exceptions import JsonShapeError, WriteError
from jsonshape.core.renderer import SchemaRenderer
from jsonshape.models.kinds import classify
from jsonshape.models.options import EmptyObjectPolicy, TokenFlavor

logger = logging.getLogger(__name__)


def _read_document(path):
    if path is None:
        logger.debug("Reading JSON from standard input")
        return load_document(click.get_binary_stream("stdin"))

    logger.debug(f"Reading JSON from {path}")
    with open_input(path) as f:
        return load_document(f)


def _detach_stdout() -> None:
    """Point stdout at the null device after the reader went away.

    Otherwise the interpreter's final flush of stdout fails a second time.
    """
    try:
        fd = sys.stdout.fileno()
    except (AttributeError, OSError, ValueError):
        return
    devnull = os.open(os.devnull, os.O_WRONLY)
    os.dup2(devnull, fd)


def _write_schema(document, options) -> None:
    """Render to stdout as UTF-8 regardless of the locale.

    Unencodable characters (lone surrogates from \\u escapes) become "?".
    """
    out = io.TextIOWrapper(
        click.get_binary_stream("stdout"),
        encoding="utf-8",
        errors="replace",
        newline="\n",
        write_through=True,
    )
    try:
        SchemaRenderer(out, options).render_document(document)
    except WriteError:
        _detach_stdout()
        raise
    finally:
        # Leave the underlying stdout open for click and the interpreter
        out.detach()


@click.command()
@click.argument("path", required=False)
@click.option("--quoted", is_flag=True, help="Wrap leaf type names in quotes")
@click.option("--expand-empty", is_flag=True, help="Write empty objects over two lines")
@click.option("--sort-keys", is_flag=True, help="Sort object keys instead of keeping document order")
@click.option("--indent", type=click.IntRange(min=0), help="Indent width per nesting level (default: 2)")
@click.option("--config", "-c", "config_path", type=click.Path(dir_okay=False), help="Config file (default: ./jsonshape.yml if present)")
@click.option("--verbose", "-v", is_flag=True, help="Log progress to stderr")
@click.version_option(version=__version__, prog_name="jsonshape")
def cli(path, quoted, expand_empty, sort_keys, indent, config_path, verbose):
    """Print the structure of a JSON document with every value replaced by its type.

    Reads PATH, or standard input when PATH is omitted. Arrays are shown
    by their first element only.

    Examples:

        jsonshape response.json

        curl -s https://api.example.com/items | jsonshape --sort-keys
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )

    try:
        config = load_config(config_path)
        options = config.with_overrides(
            flavor=TokenFlavor.QUOTED if quoted else None,
            empty_objects=EmptyObjectPolicy.EXPANDED if expand_empty else None,
            sort_keys=sort_keys or None,
            indent=indent,
        )
        document = _read_document(path)
        logger.debug(f"Document root is {classify(document).value}")

        _write_schema(document, options)
    except JsonShapeError as e:
        raise click.ClickException(str(e))


def main():
    # Load .env file so ${VAR} references in the config resolve
    load_dotenv()
    cli(prog_name="jsonshape")


if __name__ == "__main__":
    main()
