"""Message definitions, which may nest further messages and enums."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from protoc_writer.errors import ProtoValidationError
from protoc_writer.formatting import indent_level, render_template
from protoc_writer.scalar_types import NameType

from .enumeration import ProtoEnum
from .fields import Field
from .oneof import ProtoOneOf
from .reserved import Reserved


@dataclass
class ProtoMessage:
    """A single message definition."""

    name: NameType
    comment: str = ""
    messages: List[ProtoMessage] = field(default_factory=list)
    reserved_values: List[Reserved] = field(default_factory=list)
    fields: List[Field] = field(default_factory=list)
    oneofs: List[ProtoOneOf] = field(default_factory=list)
    enums: List[ProtoEnum] = field(default_factory=list)

    def validate(self) -> None:
        """Validate the message and, depth-first, everything it contains.

        Children are checked in the order fields, nested messages, reserved
        values, enums, oneofs; the first failure is raised.
        """
        if self.name == "":
            raise ProtoValidationError("Message name cannot be empty")
        for f in self.fields:
            f.validate()
        for msg in self.messages:
            msg.validate()
        for reserved in self.reserved_values:
            reserved.validate()
        for enum in self.enums:
            enum.validate()
        for oneof in self.oneofs:
            oneof.validate()

    def render(self, level: int = 0) -> str:
        """Render the message block at the given nesting level."""
        self.validate()

        # Nested blocks render themselves one level deeper; leaf lines are
        # indented by the template.
        return render_template(
            "message.proto.j2",
            indent=indent_level(level),
            inner=indent_level(level + 1),
            comment=self.comment,
            name=self.name,
            messages=[msg.render(level + 1) for msg in self.messages],
            enums=[enum.render(level + 1) for enum in self.enums],
            reserved=[r.render() for r in self.reserved_values],
            fields=[f.render() for f in self.fields],
            oneofs=[oneof.render(level + 1) for oneof in self.oneofs],
        )
