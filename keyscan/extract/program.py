from typing import Callable, Optional, Union

from tree_sitter import Node, Tree

from keyscan.common.constants import TRANSLATE_FUNCTION
from keyscan.common.enum import TsNodeType
from keyscan.extract.candidates import KeyCandidate, UnresolvedKey

ShapeProbe = Callable[[Node], Optional[str]]

WRAPPER_TYPES = (
    TsNodeType.PARENTHESIZED,
    TsNodeType.NON_NULL,
    TsNodeType.AWAIT,
    TsNodeType.AS,
    TsNodeType.SATISFIES,
)


def node_text(node: Optional[Node]) -> str:
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8")


def expressions(node: Node) -> list[Node]:
    """Named children without interleaved comments"""
    return [child for child in node.named_children if child.type != "comment"]


def unwrap(node: Optional[Node]) -> Optional[Node]:
    while node is not None and node.type in (
        TsNodeType.PARENTHESIZED,
        TsNodeType.NON_NULL,
    ):
        inner = expressions(node)
        node = inner[0] if inner else None
    return node


def inner_expression(node: Node) -> Optional[Node]:
    if node.type == TsNodeType.CALL:
        return node.child_by_field_name("function")

    if node.type in WRAPPER_TYPES:
        inner = expressions(node)
        return inner[0] if inner else None

    return None


def operand_expression(node: Node) -> Optional[Node]:
    """The node one level down: a member's object, a call's callee or a wrapped expression"""
    if node.type == TsNodeType.MEMBER:
        return node.child_by_field_name("object")
    return inner_expression(node)


# Shape probes, tried in order by infer_key


def string_literal(node: Node) -> Optional[str]:
    if node.type == TsNodeType.STRING:
        return node_text(node)[1:-1]

    if node.type == TsNodeType.TEMPLATE and not any(
        child.type == TsNodeType.TEMPLATE_SUBSTITUTION for child in node.children
    ):
        return node_text(node)[1:-1]

    return None


def identifier_name(node: Node) -> Optional[str]:
    node = unwrap(node)
    if node is None:
        return None

    if node.type != TsNodeType.IDENTIFIER:
        # getKey() or (key as string)
        node = unwrap(inner_expression(node))

    if node is not None and node.type == TsNodeType.IDENTIFIER:
        return node_text(node)
    return None


def property_name(node: Node) -> Optional[str]:
    if node.type == TsNodeType.MEMBER:
        return node_text(node.child_by_field_name("property"))
    return None


def nested_property_name(node: Node) -> Optional[str]:
    inner = inner_expression(node)
    if inner is None:
        return None
    return property_name(unwrap(inner) or inner)


def _side_property_name(node: Node, side: str) -> Optional[str]:
    if node.type != TsNodeType.BINARY:
        return None

    operand = unwrap(node.child_by_field_name(side))
    if operand is None:
        return None

    inner = unwrap(operand_expression(operand))
    if inner is None:
        return None
    return property_name(inner)


def binary_left_name(node: Node) -> Optional[str]:
    return _side_property_name(node, "left")


def binary_right_name(node: Node) -> Optional[str]:
    return _side_property_name(node, "right")


def template_head(node: Node) -> Optional[str]:
    if node.type != TsNodeType.TEMPLATE:
        return None
    return node_text(node)[1:].split("${", 1)[0]


def ternary_key(node: Node) -> Optional[str]:
    # consequence first, then the condition, then the alternative;
    # the condition is never evaluated
    if node.type != TsNodeType.TERNARY:
        return None

    consequence = unwrap(node.child_by_field_name("consequence"))
    if consequence is not None:
        value = string_literal(consequence)
        if value:
            return value

    condition = unwrap(node.child_by_field_name("condition"))
    if condition is not None:
        inner = unwrap(operand_expression(condition))
        if inner is not None:
            value = property_name(inner) or identifier_name(inner)
            if value:
                return value

        value = identifier_name(condition)
        if value:
            return value

    alternative = unwrap(node.child_by_field_name("alternative"))
    if alternative is not None:
        return string_literal(alternative)

    return None


SHAPE_PROBES: tuple[ShapeProbe, ...] = (
    string_literal,
    identifier_name,
    property_name,
    nested_property_name,
    binary_left_name,
    binary_right_name,
    template_head,
    ternary_key,
)


def element_texts(node: Node) -> tuple[str, ...]:
    if node.type != TsNodeType.ARRAY:
        return ()

    texts = (string_literal(unwrap(element) or element) for element in expressions(node))
    return tuple(text for text in texts if text)


def infer_key(node: Node) -> KeyCandidate:
    for probe in SHAPE_PROBES:
        value = probe(node)
        if value:
            return value

    elements = element_texts(node)
    if elements:
        return elements

    return UnresolvedKey.from_source(node_text(node))


def callee_name(call: Node) -> str:
    callee = call.child_by_field_name("function")
    if callee is None:
        return ""

    if callee.type == TsNodeType.IDENTIFIER:
        return node_text(callee)

    if callee.type == TsNodeType.MEMBER:
        return node_text(callee.child_by_field_name("property"))

    return ""


def call_keys(call: Node) -> list[KeyCandidate]:
    """Keys for one translation call; only the first argument names the key"""
    arguments = call.child_by_field_name("arguments")
    values = expressions(arguments) if arguments is not None else []

    if not values:
        return [UnresolvedKey()]

    argument = unwrap(values[0]) or values[0]

    if argument.type == TsNodeType.ARRAY:
        elements = [unwrap(e) or e for e in expressions(argument)]
        if not all(string_literal(e) for e in elements):
            return [infer_key(element) for element in elements]

    return [infer_key(argument)]


def extract_program_keys(
    tree: Union[Tree, Node], function_name: str = TRANSLATE_FUNCTION
) -> list[KeyCandidate]:
    """
    Collect the keys passed to ``function_name(...)`` anywhere in a program tree.

    Every node is visited depth-first; a matching call's children are still
    walked so nested calls are found too.
    """
    root = tree.root_node if isinstance(tree, Tree) else tree
    results: list[KeyCandidate] = []
    stack = [root]

    while stack:
        node = stack.pop()

        if node.type == TsNodeType.CALL and callee_name(node) == function_name:
            results.extend(call_keys(node))

        stack.extend(reversed(node.children))

    return results
