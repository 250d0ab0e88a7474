import pytest

from inetlisp.net.port_info import PortInfo


def test_principal_name():
    info = PortInfo.from_name("x!")
    assert info.name == "x"
    assert info.is_principal is True


def test_plain_name():
    info = PortInfo.from_name("result")
    assert info.name == "result"
    assert info.is_principal is False


@pytest.mark.parametrize("name", ["x!", "result", "target!", "first"])
def test_str_round_trip(name):
    info = PortInfo.from_name(name)
    assert str(info) == name
    assert PortInfo.from_name(str(info)) == info