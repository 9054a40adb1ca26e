"""Enumeration definitions.

https://protobuf.dev/programming-guides/proto3/#enum
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List

from protoc_writer.errors import ProtoValidationError
from protoc_writer.formatting import indent_level, render_template, with_comment
from protoc_writer.scalar_types import NameType, TagType


@dataclass
class ProtoEnumValue:
    """A single named value within an enumeration."""

    name: NameType
    tag: TagType
    comment: str = ""

    def render(self) -> str:
        return with_comment(f"{self.name} = {self.tag};", self.comment)


@dataclass
class ProtoEnum:
    """An enumeration type; tags may repeat only when allow_alias is set."""

    name: NameType
    values: List[ProtoEnumValue] = field(default_factory=list)
    allow_alias: bool = False
    comment: str = ""

    def validate(self) -> None:
        if self.name == "":
            raise ProtoValidationError("Enum must have a non-empty name")
        if not self.values:
            raise ProtoValidationError("Enum must have non-empty set of values")
        if not self.allow_alias:
            tags: Dict[TagType, NameType] = {}
            for value in self.values:
                if value.tag in tags:
                    raise ProtoValidationError(
                        "Enum value has tag that is already in use while aliasing "
                        f"is not allowed: {value.name}"
                    )
                tags[value.tag] = value.name

    def render(self, level: int = 0) -> str:
        """Render the enum block at the given nesting level.

        Values are emitted in ascending tag order. The sort is done in place on
        ``self.values`` (stable, so aliased values keep their declared order),
        which means rendering reorders the caller's list. Do not render the same
        ProtoEnum from two threads at once.
        """
        self.validate()
        self.values.sort(key=lambda v: v.tag)

        return render_template(
            "enum.proto.j2",
            indent=indent_level(level),
            inner=indent_level(level + 1),
            comment=self.comment,
            name=self.name,
            allow_alias=self.allow_alias,
            values=[v.render() for v in self.values],
        )
