import pytest

from keyscan.core.exceptions import SourceParseError
from keyscan.extract.candidates import UnresolvedKey
from keyscan.extract.parsers import parse_program
from keyscan.extract.program import extract_program_keys


def test_plain_call(program_keys):
    assert program_keys("instant('errors.timeout');") == ["errors.timeout"]


def test_method_call(program_keys):
    source = """
    class Foo {
      title = this.translate.instant("errors.timeout");
    }
    """
    assert program_keys(source) == ["errors.timeout"]


def test_ternary_prefers_true_branch(program_keys):
    assert program_keys("instant(cond ? 'a.b' : 'c.d');") == ["a.b"]


def test_ternary_uses_condition_before_false_branch(program_keys):
    assert program_keys("instant(this.state.ready ? key : 'c.d');") == ["state"]


def test_array_argument(program_keys):
    assert program_keys("instant(['k1', 'k2']);") == [("k1", "k2")]


def test_array_with_expressions_is_split(program_keys):
    assert program_keys("instant([this.keys.first, 'k2']);") == ["first", "k2"]


def test_template_head(program_keys):
    assert program_keys("instant(`errors.${code}`);") == ["errors."]


def test_template_without_substitution(program_keys):
    assert program_keys("instant(`errors.plain`);") == ["errors.plain"]


def test_identifier(program_keys):
    assert program_keys("instant(messageKey);") == ["messageKey"]


def test_property_access(program_keys):
    assert program_keys("instant(this.keys.title);") == ["title"]


def test_logical_expression_left_side(program_keys):
    assert program_keys("instant(this.labels.empty || fallback);") == ["labels"]


def test_logical_expression_right_side(program_keys):
    assert program_keys("instant(fallback() || this.labels.empty);") == ["labels"]


def test_interpolation_params_are_ignored(program_keys):
    assert program_keys("instant('items.count', { count: 2 });") == ["items.count"]


def test_nested_calls_are_found(program_keys):
    keys = program_keys("instant(svc.instant('inner.key'));")
    assert "inner.key" in keys
    assert len(keys) == 2


def test_other_functions_are_ignored(program_keys):
    assert program_keys("this.translate.get('a.b'); instantly('c');") == []


def test_call_without_arguments(program_keys):
    assert program_keys("instant();") == [UnresolvedKey()]


def test_unrecognized_argument_is_unresolved(program_keys):
    assert program_keys("instant(getKey( ) + 1);") == [
        UnresolvedKey(diagnostic="getKey()+1")
    ]


def test_custom_function_name():
    tree = parse_program("i18n.t('a.b'); instant('c');")
    assert extract_program_keys(tree, "t") == ["a.b"]


def test_strict_parsing_raises_on_syntax_error():
    with pytest.raises(SourceParseError):
        parse_program("const = ;", strict=True)


def test_lenient_parsing_scans_partial_tree():
    tree = parse_program("instant('still.found'); const = ;")
    assert "still.found" in extract_program_keys(tree)


def test_type_assertion_is_looked_through(program_keys):
    assert program_keys("instant((this.keys.title as string));") == ["title"]


def test_extraction_is_idempotent(program_keys):
    source = "instant('a'); x.instant(flag ? 'b' : 'c'); instant(['d', 'e']);"
    assert set(program_keys(source)) == set(program_keys(source))


def test_ternary_condition_identifier_object(program_keys):
    assert program_keys("instant(flags.on ? key : 'c.d');") == ["flags"]


def test_bare_call_yields_callee_name(program_keys):
    assert program_keys("instant(getKey());") == ["getKey"]


def test_call_on_left_side_of_concatenation(program_keys):
    assert program_keys("instant(this.getPrefix() + '.title');") == ["getPrefix"]


def test_call_on_right_side_of_concatenation(program_keys):
    assert program_keys("instant('prefix.' + this.getSuffix());") == ["getSuffix"]
