"""Variable and environment types for the script interpreter."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class VarType(Enum):
    """Kinds of value a script variable can hold."""

    INT = 0
    DOUBLE = 1
    STRING = 2
    FILEPATH = 3
    ENVIRONMENT_SPECIFIC = 4
    ARRAY = 5


@dataclass
class InterpVar:
    """A named script variable and its type."""

    vartoken: str
    typing: VarType
    line_val: int = 0
    filepath: str = ""


class Environment:
    """Holds the state shared by a running script."""