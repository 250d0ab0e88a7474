from inetlisp.core.opcode import Apply, GetVariable, Literal, SetVariable


def test_apply_str():
    assert str(Apply(2)) == "(apply 2)"


def test_literal_str_uses_value_format():
    assert str(Literal(True)) == "(literal true)"
    assert str(Literal(7)) == "(literal 7)"
    assert str(Literal(1.0)) == "(literal 1.0)"


def test_variable_str():
    assert str(GetVariable(3)) == "(get-variable 3)"
    assert str(SetVariable(0)) == "(set-variable 0)"


def test_opcodes_compare_by_content():
    assert Apply(1) == Apply(1)
    assert GetVariable(1) != SetVariable(1)
    assert Literal(4).value == 4