from enum import Enum


class SourceKind(str, Enum):
    MARKUP = "markup"
    PROGRAM = "program"


# tree-sitter node types the program extractor inspects
class TsNodeType(str, Enum):
    CALL = "call_expression"
    MEMBER = "member_expression"
    IDENTIFIER = "identifier"
    STRING = "string"
    TEMPLATE = "template_string"
    TEMPLATE_SUBSTITUTION = "template_substitution"
    BINARY = "binary_expression"
    TERNARY = "ternary_expression"
    PARENTHESIZED = "parenthesized_expression"
    NON_NULL = "non_null_expression"
    AWAIT = "await_expression"
    ARRAY = "array"
    AS = "as_expression"
    SATISFIES = "satisfies_expression"
