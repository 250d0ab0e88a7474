from inetlisp.core.function import Function
from inetlisp.core.opcode import Apply, GetVariable, Literal, SetVariable
from inetlisp.value import format_value


def _function():
    function = Function(2, "f")
    function.add_opcode(SetVariable(0))
    function.add_opcode(GetVariable(0))
    function.add_opcode(Apply(1))
    return function


def test_opcodes_are_kept_in_order():
    function = _function()
    assert len(function) == 3
    assert function[0] == SetVariable(0)
    assert function[2] == Apply(1)
    assert function.arity == 2


def test_str_is_the_name():
    function = _function()
    assert str(function) == "f"
    assert format_value(function) == "f"


def test_literal_of_function_prints_its_name():
    function = _function()
    assert str(Literal(function)) == "(literal f)"


def test_format_with_cursor_marks_current_opcode():
    function = _function()
    text = function.format_with_cursor(1)
    assert text == (
        "<function f>\n"
        "(set-variable 0)\n"
        "(get-variable 0) <<<\n"
        "(apply 1)\n"
        "</function>\n"
    )


def test_format_without_cursor_has_no_marker():
    function = _function()
    text = function.format_with_cursor()
    assert "<<<" not in text
    assert text.startswith("<function f>\n")
    assert text.endswith("</function>\n")


def test_new_function_is_empty():
    function = Function(0)
    assert len(function) == 0
    assert function.local_indexes == {}
    assert function.format_with_cursor() == "<function >\n</function>\n"