import logging
from pathlib import Path
from typing import Optional

import tree_sitter_typescript
from bs4 import BeautifulSoup
from bs4.element import PageElement, PreformattedString, Stylesheet
from tree_sitter import Language, Node, Parser, Tree

from keyscan.common.constants import DROPPED_TEXT_ELEMENTS, HTML_PARSER
from keyscan.core.exceptions import SourceParseError, SourceReadError

logger = logging.getLogger(__name__)

TS_LANGUAGE = Language(tree_sitter_typescript.language_typescript())


def read_source(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SourceReadError(path, str(e)) from e


def parse_markup(html: str) -> list[PageElement]:
    """
    Parse a template into its top-level nodes.

    - Comments, doctypes and other declarations are dropped.
    - Attribute values stay single strings (``class`` is not split).
    - Script content is kept verbatim as a text node.
    - Style and pre content is dropped; their attributes are still kept.
    """
    soup = BeautifulSoup(html, HTML_PARSER, multi_valued_attributes=None)

    dropped = (PreformattedString, Stylesheet)
    for node in soup.find_all(string=lambda s: isinstance(s, dropped)):
        node.extract()

    for tag in soup.find_all(DROPPED_TEXT_ELEMENTS):
        tag.clear()

    return list(soup.contents)


def _first_error(node: Node) -> Optional[Node]:
    if node.type == "ERROR" or node.is_missing:
        return node

    for child in node.children:
        if child.has_error:
            found = _first_error(child)
            if found is not None:
                return found

    return None


def parse_program(source: str, path: Optional[Path] = None, strict: bool = False) -> Tree:
    parser = Parser(TS_LANGUAGE)
    tree = parser.parse(source.encode("utf-8"))

    if tree.root_node.has_error:
        error = _first_error(tree.root_node) or tree.root_node
        line, column = error.start_point
        location = path or Path("<source>")

        if strict:
            raise SourceParseError(location, line + 1, column + 1)

        logger.warning(
            "Syntax error in %s at line %d, column %d; scanning partial tree",
            location,
            line + 1,
            column + 1,
        )

    return tree
