"""Domain enumerations."""

from enum import Enum, auto


class UnitKind(Enum):
    """Kind of code unit."""

    MODULE = auto()  # one .py file
    CLASS = auto()  # top-level class in a module


class ReferenceKind(Enum):
    """How a code unit refers to another one."""

    IMPORT = auto()  # import statement
    INHERITANCE = auto()  # base class
    ANNOTATION = auto()  # field, parameter or return annotation
    USAGE = auto()  # name used in a body, decorator or default


class CheckStatus(Enum):
    """Outcome of one layering check."""

    CONFORMANT = auto()  # rule applied, nothing found
    VIOLATED = auto()  # at least one violation
    NOTHING_CHECKED = auto()  # rule applied to no unit


class ImportScope(Enum):
    """Whether test code is part of the analyzed snapshot."""

    EXCLUDE_TESTS = auto()
    INCLUDE_TESTS = auto()
