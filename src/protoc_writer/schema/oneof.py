"""Oneof groups: fields of which at most one is set at a time.

https://protobuf.dev/programming-guides/proto3/#oneof
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from protoc_writer.errors import ProtoValidationError
from protoc_writer.formatting import indent_level, render_template
from protoc_writer.scalar_types import NameType

from .fields import Field


@dataclass
class ProtoOneOf:
    name: NameType
    fields: List[Field] = field(default_factory=list)
    comment: str = ""

    def validate(self) -> None:
        if self.name == "":
            raise ProtoValidationError("OneOf must have a non-empty name")
        if not self.fields:
            raise ProtoValidationError(f"OneOf {self.name} must have non-empty set of values")
        for f in self.fields:
            f.validate()

    def render(self, level: int = 0) -> str:
        self.validate()
        return render_template(
            "oneof.proto.j2",
            indent=indent_level(level),
            inner=indent_level(level + 1),
            comment=self.comment,
            name=self.name,
            fields=[f.render() for f in self.fields],
        )
