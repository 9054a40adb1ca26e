"""Reserved names and field numbers within a message.

https://protobuf.dev/programming-guides/proto3/#reserved
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from protoc_writer.errors import ProtoValidationError
from protoc_writer.scalar_types import NameType, TagType


@dataclass
class ReservedName:
    """A field name that cannot be reused within a message."""

    name: NameType

    def validate(self) -> None:
        if self.name == "":
            raise ProtoValidationError("ReservedName field must have a non-empty name")

    def render(self) -> str:
        return f'"{self.name}"'


@dataclass
class ReservedTagValue:
    """A single field number that cannot be reused within a message."""

    tag: TagType

    def validate(self) -> None:
        pass

    def render(self) -> str:
        return f"{self.tag}"


@dataclass
class ReservedTagRange:
    """An inclusive range of field numbers that cannot be reused within a message."""

    lower_tag: TagType
    upper_tag: TagType

    def validate(self) -> None:
        if self.lower_tag < 0:
            raise ProtoValidationError(
                "ReservedTagRange lower-tag must be greater-than-or-equal to zero"
            )
        if self.lower_tag >= self.upper_tag:
            raise ProtoValidationError(
                "ReservedTagRange upper-tag must be greater-than lower-tag"
            )

    def render(self) -> str:
        return f"{self.lower_tag} to {self.upper_tag}"


Reserved = Union[ReservedName, ReservedTagValue, ReservedTagRange]
