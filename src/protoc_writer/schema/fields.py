"""Message field declarations.

Four closed variants share the same shape (name, tag, rule, comment) and differ
in how the value type is given:

  - ScalarField:    a built-in scalar type
  - CustomField:    an unchecked type name, e.g. an imported or nested message
  - MapField:       built-in key type -> built-in value type
  - CustomMapField: built-in key type -> unchecked value type name

Each variant renders to a single unindented line; the enclosing message or
oneof applies indentation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from protoc_writer.errors import ProtoValidationError
from protoc_writer.formatting import with_comment
from protoc_writer.scalar_types import (
    MAP_KEY_TYPES,
    MAX_FIELD_TAG,
    FieldRule,
    FieldType,
    NameType,
    TagType,
    field_rule_keyword,
    field_type_keyword,
)


def _validate_tag(kind: str, name: NameType, tag: TagType) -> None:
    if tag < 0 or tag > MAX_FIELD_TAG:
        raise ProtoValidationError(
            f"{kind} {name} must have a tag between 0 and {MAX_FIELD_TAG}, got {tag}"
        )


def _validate_map_key(name: NameType, key_typing: int) -> None:
    if key_typing not in MAP_KEY_TYPES:
        raise ProtoValidationError(
            f"Map field {name} must use a scalar integral or string type for the map key"
        )


@dataclass
class ScalarField:
    """A message field that uses a built-in protobuf type."""

    name: NameType
    tag: TagType
    typing: FieldType
    rule: FieldRule = FieldRule.NONE
    comment: str = ""

    def validate(self) -> None:
        if self.name == "":
            raise ProtoValidationError("Scalar field must have a non-empty name")
        _validate_tag("Scalar field", self.name, self.tag)

    def render(self) -> str:
        line = (
            f"{field_rule_keyword(self.rule)}{field_type_keyword(self.typing)} "
            f"{self.name} = {self.tag};"
        )
        return with_comment(line, self.comment)


@dataclass
class CustomField:
    """A message field with an unchecked, custom type (e.g. an imported message)."""

    name: NameType
    tag: TagType
    typing: str
    rule: FieldRule = FieldRule.NONE
    comment: str = ""

    def validate(self) -> None:
        if self.name == "":
            raise ProtoValidationError("CustomField name must have non-empty name")
        _validate_tag("CustomField", self.name, self.tag)

    def render(self) -> str:
        line = f"{field_rule_keyword(self.rule)}{self.typing} {self.name} = {self.tag};"
        return with_comment(line, self.comment)


@dataclass
class MapField:
    """A map field whose key and value are both built-in protobuf types."""

    name: NameType
    tag: TagType
    key_typing: FieldType
    value_typing: FieldType
    rule: FieldRule = FieldRule.NONE
    comment: str = ""

    def validate(self) -> None:
        if self.name == "":
            raise ProtoValidationError("MapField must have a non-empty name")
        _validate_tag("MapField", self.name, self.tag)
        _validate_map_key(self.name, self.key_typing)
        if self.value_typing < 0:
            raise ProtoValidationError(
                f"Map field {self.name} must have a type specified for the map value"
            )
        if self.rule == FieldRule.REPEATED:
            raise ProtoValidationError("MapField cannot use repeated rule")

    def render(self) -> str:
        line = (
            f"{field_rule_keyword(self.rule)}map<{field_type_keyword(self.key_typing)}, "
            f"{field_type_keyword(self.value_typing)}> {self.name} = {self.tag};"
        )
        return with_comment(line, self.comment)


@dataclass
class CustomMapField:
    """A map field with a built-in key type and a custom value type."""

    name: NameType
    tag: TagType
    key_typing: FieldType
    value_typing: str
    rule: FieldRule = FieldRule.NONE
    comment: str = ""

    def validate(self) -> None:
        if self.name == "":
            raise ProtoValidationError("CustomMapField name must have non-empty name")
        _validate_tag("CustomMapField", self.name, self.tag)
        _validate_map_key(self.name, self.key_typing)
        if self.rule == FieldRule.REPEATED:
            raise ProtoValidationError("CustomMapField cannot use repeated rule")

    def render(self) -> str:
        line = (
            f"{field_rule_keyword(self.rule)}map<{field_type_keyword(self.key_typing)}, "
            f"{self.value_typing}> {self.name} = {self.tag};"
        )
        return with_comment(line, self.comment)


Field = Union[ScalarField, CustomField, MapField, CustomMapField]
