"""Enumerations used across the domain layer and their free-text parsers.

Every enumeration comes with a ``parse_*`` function that turns user supplied
text into a member. Matching is case-insensitive and ignores surrounding
whitespace; the member name, its value and a Portuguese label such as
``operador`` or ``importada`` are all accepted. Anything else falls back to
the documented default instead of raising. Stored documents are read strictly
by value, so the labels only matter for prompt input.
"""

from collections.abc import Mapping
from enum import Enum
from typing import TypeVar

E = TypeVar("E", bound=Enum)


class PermissionLevel(Enum):
    """Permission levels gating which operations an employee may invoke."""

    ADMIN = "ADMIN"
    ENGINEER = "ENGINEER"
    OPERATOR = "OPERATOR"


class AircraftType(Enum):
    """Enumeration of aircraft types"""

    COMMERCIAL = "COMMERCIAL"
    MILITARY = "MILITARY"


class PartType(Enum):
    """Origin of a part."""

    NATIONAL = "NATIONAL"
    IMPORTED = "IMPORTED"


class PartStatus(Enum):
    """Logistics status of a part."""

    IN_PRODUCTION = "IN_PRODUCTION"
    IN_TRANSPORT = "IN_TRANSPORT"
    READY = "READY"


class StageStatus(Enum):
    """Lifecycle of a production stage."""

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class TestKind(Enum):
    """Kinds of tests run on an aircraft."""

    __test__ = False  # not a pytest test class

    ELECTRICAL = "ELECTRICAL"
    HYDRAULIC = "HYDRAULIC"
    AERODYNAMIC = "AERODYNAMIC"


class TestResult(Enum):
    """Outcome of a test."""

    __test__ = False  # not a pytest test class

    PASSED = "PASSED"
    FAILED = "FAILED"


# Portuguese labels accepted at the prompts
_PERMISSION_ALIASES = {
    "ADMINISTRADOR": PermissionLevel.ADMIN,
    "ENGENHEIRO": PermissionLevel.ENGINEER,
    "OPERADOR": PermissionLevel.OPERATOR,
}
_AIRCRAFT_TYPE_ALIASES = {
    "COMERCIAL": AircraftType.COMMERCIAL,
    "MILITAR": AircraftType.MILITARY,
}
_PART_TYPE_ALIASES = {
    "NACIONAL": PartType.NATIONAL,
    "IMPORTADA": PartType.IMPORTED,
}
_TEST_KIND_ALIASES = {
    "ELETRICO": TestKind.ELECTRICAL,
    "HIDRAULICO": TestKind.HYDRAULIC,
    "AERODINAMICO": TestKind.AERODYNAMIC,
}
_TEST_RESULT_ALIASES = {"APROVADO": TestResult.PASSED}


def parse_enum(
    enum_type: type[E],
    raw: str | None,
    default: E,
    aliases: Mapping[str, E] | None = None,
) -> E:
    """Parse free text into a member of ``enum_type``.

    Args:
        enum_type: The enumeration to parse into.
        raw: User supplied text. ``None`` is treated as empty.
        default: Member returned when the text matches nothing.
        aliases: Extra upper-case labels mapped to members.

    Returns:
        The matching member, or ``default``.
    """
    key = (raw or "").strip().upper()
    if key in enum_type.__members__:
        return enum_type[key]
    for member in enum_type:
        if str(member.value).upper() == key:
            return member
    if aliases and key in aliases:
        return aliases[key]
    return default


def parse_permission_level(raw: str | None) -> PermissionLevel:
    """Parse a permission level, defaulting to OPERATOR."""
    return parse_enum(
        PermissionLevel, raw, PermissionLevel.OPERATOR, _PERMISSION_ALIASES
    )


def parse_aircraft_type(raw: str | None) -> AircraftType:
    """Parse an aircraft type, defaulting to COMMERCIAL."""
    return parse_enum(AircraftType, raw, AircraftType.COMMERCIAL, _AIRCRAFT_TYPE_ALIASES)


def parse_part_type(raw: str | None) -> PartType:
    """Parse a part type, defaulting to NATIONAL."""
    return parse_enum(PartType, raw, PartType.NATIONAL, _PART_TYPE_ALIASES)


def parse_test_kind(raw: str | None) -> TestKind:
    """Parse a test kind, defaulting to ELECTRICAL."""
    return parse_enum(TestKind, raw, TestKind.ELECTRICAL, _TEST_KIND_ALIASES)


def parse_test_result(raw: str | None) -> TestResult:
    """Parse a test result.

    Only PASSED (or its alias APROVADO) yields a pass; every other input,
    including empty text, is recorded as FAILED.
    """
    return parse_enum(TestResult, raw, TestResult.FAILED, _TEST_RESULT_ALIASES)
