"""Closed tables for protobuf scalar types and field rules."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, FrozenSet

# An import statement path, emitted verbatim.
ImportType = str

# A message, field, enum or oneof name.
NameType = str

# A field or enum value number.
TagType = int

# Highest field number protobuf accepts (2^29 - 1).
MAX_FIELD_TAG = 536870911


class FieldRule(IntEnum):
    """Rules that can be applied to message fields."""

    NONE = 0
    REPEATED = 1


class FieldType(IntEnum):
    """Built-in protobuf scalar types."""

    DOUBLE = 0
    FLOAT = 1
    INT32 = 2
    INT64 = 3
    UINT32 = 4
    UINT64 = 5
    SINT32 = 6
    SINT64 = 7
    FIXED32 = 8
    FIXED64 = 9
    SFIXED32 = 10
    SFIXED64 = 11
    BOOL = 12
    STRING = 13
    BYTES = 14


# FieldType -> proto keyword
FIELD_TYPE_KEYWORDS: Dict[int, str] = {
    FieldType.DOUBLE: "double",
    FieldType.FLOAT: "float",
    FieldType.INT32: "int32",
    FieldType.INT64: "int64",
    FieldType.UINT32: "uint32",
    FieldType.UINT64: "uint64",
    FieldType.SINT32: "sint32",
    FieldType.SINT64: "sint64",
    FieldType.FIXED32: "fixed32",
    FieldType.FIXED64: "fixed64",
    FieldType.SFIXED32: "sfixed32",
    FieldType.SFIXED64: "sfixed64",
    FieldType.BOOL: "bool",
    FieldType.STRING: "string",
    FieldType.BYTES: "bytes",
}

FIELD_RULE_KEYWORDS: Dict[int, str] = {
    FieldRule.NONE: "",
    FieldRule.REPEATED: "repeated ",
}

# Floating point and bytes types cannot be used as map keys.
MAP_KEY_TYPES: FrozenSet[FieldType] = frozenset(
    t for t in FieldType
    if t not in (FieldType.DOUBLE, FieldType.FLOAT, FieldType.BYTES)
)


def field_type_keyword(value: int) -> str:
    """Return the proto keyword for a scalar type, or "" if it is unknown."""
    return FIELD_TYPE_KEYWORDS.get(value, "")


def field_rule_keyword(rule: int) -> str:
    """Return the rule prefix for a field; "repeated " keeps its trailing space."""
    return FIELD_RULE_KEYWORDS.get(rule, "")


def field_type_from_keyword(keyword: str) -> FieldType:
    """Look up a FieldType by its proto keyword. Raises KeyError if unknown."""
    for field_type, name in FIELD_TYPE_KEYWORDS.items():
        if name == keyword:
            return FieldType(field_type)
    raise KeyError(keyword)
