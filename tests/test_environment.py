import pytest

from workbench.environment import InterpVar, VarType


@pytest.mark.parametrize(
    "name",
    ["INT", "DOUBLE", "STRING", "FILEPATH", "ENVIRONMENT_SPECIFIC", "ARRAY"],
)
def test_interpvar_accepts_every_declared_type(name):
    var = InterpVar("token", VarType[name])
    assert var.typing.name == name


@pytest.mark.parametrize(
    ("value", "name"),
    [
        (0, "INT"),
        (1, "DOUBLE"),
        (2, "STRING"),
        (3, "FILEPATH"),
        (4, "ENVIRONMENT_SPECIFIC"),
        (5, "ARRAY"),
    ],
)
def test_vartype_lookup_by_declared_position(value, name):
    assert VarType(value).name == name


def test_interpvar_keeps_token_and_type():
    var = InterpVar("count", VarType.INT)
    assert var.vartoken == "count"
    assert var.typing is VarType.INT


def test_interpvar_defaults_and_equality():
    first = InterpVar("path", VarType.FILEPATH)
    second = InterpVar("path", VarType.FILEPATH)
    assert first == second
    assert first.line_val == 0
    assert first.filepath == ""