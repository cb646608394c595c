from dataclasses import dataclass

from log4net_xml import MessageTemplate, PropertyToken, ScalarValue, TextToken, parse_template
from log4net_xml.values import Destructuring


@dataclass
class User:
    name: str
    age: int


def render(template_text, *args):
    template = parse_template(template_text)
    return template.render(template.bind(args))


def test_text_only_template():
    template = parse_template("Some message")
    assert template.tokens == (TextToken("Some message"),)
    assert template.render({}) == "Some message"


def test_named_property_strings_are_quoted():
    assert render("Hello {Name}", "World") == 'Hello "World"'


def test_literal_format_removes_quotes():
    assert render("Hello {Name:l}", "World") == "Hello World"


def test_numbers_are_rendered_plainly():
    assert render("{Count} items", 42) == "42 items"


def test_format_spec():
    assert render("Took {Elapsed:.2f} ms", 3.14159) == "Took 3.14 ms"


def test_invalid_format_spec_falls_back_to_str():
    assert render("{Value:zz}", 5) == "5"


def test_positional_properties_bind_by_index():
    assert render("{1} before {0}", "a", "b") == '"b" before "a"'


def test_named_properties_bind_in_order_of_appearance():
    template = parse_template("{A} {B} {A}")
    bound = template.bind(("x", "y"))
    assert bound == {"A": ScalarValue("x"), "B": ScalarValue("y")}
    assert template.render(bound) == '"x" "y" "x"'


def test_extra_arguments_are_ignored():
    assert render("{A}", 1, 2, 3) == "1"


def test_missing_property_keeps_hole_text():
    assert render("{A} and {B}", 1) == "1 and {B}"


def test_escaped_braces():
    assert render("{{literal}} {Value}", 1) == "{literal} 1"
    assert render("}}") == "}"


def test_malformed_holes_are_text():
    template = parse_template("{bad name} {} {A,x} {open")
    assert template.property_tokens == ()
    assert template.render({}) == "{bad name} {} {A,x} {open"


def test_nested_open_brace_is_text():
    template = parse_template("{a{B}")
    assert template.render({"B": ScalarValue(1)}) == "{a1"


def test_alignment():
    assert render("[{Count,5}]", 42) == "[   42]"
    assert render("[{Count,-5}]", 42) == "[42   ]"


def test_alignment_and_format_together():
    token = parse_template("{Value,8:.1f}").property_tokens[0]
    assert token.alignment == 8
    assert token.format_spec == ".1f"
    assert render("{Value,8:.1f}", 2.25) == "     2.2"


def test_destructure_operator():
    token = parse_template("{@User}").property_tokens[0]
    assert token == PropertyToken(name="User", raw_text="{@User}", destructuring=Destructuring.DESTRUCTURE)
    assert render("Logged in {@User}", User("alice", 30)) == 'Logged in User { name: "alice", age: 30 }'


def test_stringify_operator():
    assert render("{$Items}", [1, 2]) == '"[1, 2]"'


def test_default_capture_of_object_uses_str():
    assert render("{User}", User("bob", 5)) == "User(name='bob', age=5)"


def test_literal_template_has_no_holes():
    template = MessageTemplate.literal("{NotAHole}")
    assert template.property_tokens == ()
    assert template.render({"NotAHole": ScalarValue(1)}) == "{NotAHole}"


def test_empty_literal_template():
    assert MessageTemplate.literal("").render({}) == ""


def test_parsed_templates_are_cached():
    assert parse_template("cached {Value}") is parse_template("cached {Value}")
