from collections import deque
from typing import Iterable, Iterator, Union

from bs4.element import NavigableString, PageElement, Tag

from keyscan.common.constants import QUOTE_CHARS, TRANSLATE_ATTRIBUTE, TRANSLATE_MARKER
from keyscan.extract.candidates import UnresolvedKey

MarkupKey = Union[str, UnresolvedKey]


def raw_attributes(node: PageElement) -> str:
    if not isinstance(node, Tag) or not node.attrs:
        return ""

    return " ".join(f'{name}="{value}"' for name, value in node.attrs.items())


def raw_text(node: PageElement) -> str:
    if isinstance(node, NavigableString):
        return str(node)
    return ""


def last_quoted(value: str) -> str:
    """Text between the rightmost quote and its matching quote, or '' if there is none"""
    end = max(value.rfind(quote) for quote in QUOTE_CHARS)
    if end == -1:
        return ""

    start = value.rfind(value[end], 0, end)
    if start == -1:
        return ""

    return value[start + 1 : end].strip()


def extract_pipe_keys(value: str) -> Iterator[MarkupKey]:
    remaining = value

    while True:
        index = remaining.find(TRANSLATE_MARKER)
        if index == -1:
            return

        preceding = remaining[:index].strip()
        key = last_quoted(preceding)

        yield key or UnresolvedKey.from_source(preceding)

        remaining = remaining[index + len(TRANSLATE_MARKER) :]


def attribute_keys(node: PageElement) -> Iterator[MarkupKey]:
    if isinstance(node, Tag):
        direct = node.get(TRANSLATE_ATTRIBUTE)
        if isinstance(direct, str) and direct.strip():
            yield direct.strip()
            return

    yield from extract_pipe_keys(raw_attributes(node))


def text_keys(node: PageElement) -> Iterator[MarkupKey]:
    text = raw_text(node)

    if TRANSLATE_ATTRIBUTE not in text:
        return

    yield from extract_pipe_keys(text)


def extract_markup_keys(nodes: Iterable[PageElement]) -> Iterator[MarkupKey]:
    """
    Walk markup trees breadth-first and yield every translation key found.

    Keys come from a ``translate="key"`` attribute or from ``'key' | translate``
    pipes inside attribute values and text. A pipe whose key is not a quoted
    literal yields an ``UnresolvedKey``. Result order follows the walk and
    should be treated as unordered.
    """
    queue = deque(nodes)

    while queue:
        node = queue.popleft()

        if isinstance(node, Tag):
            queue.extend(node.contents)

        if raw_attributes(node) or raw_text(node):
            yield from attribute_keys(node)
            yield from text_keys(node)
