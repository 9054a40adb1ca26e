"""Top-level proto3 file definition."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from protoc_writer.errors import ProtoValidationError
from protoc_writer.formatting import render_template
from protoc_writer.scalar_types import ImportType

from .enumeration import ProtoEnum
from .message import ProtoMessage


@dataclass
class ProtoFile:
    """A complete .proto file: package, imports, top-level enums and messages."""

    package: str = ""
    java_package: str = ""
    imports: List[ImportType] = field(default_factory=list)
    messages: List[ProtoMessage] = field(default_factory=list)
    enums: List[ProtoEnum] = field(default_factory=list)

    def validate(self) -> None:
        if not self.messages:
            raise ProtoValidationError("Proto file must contain at least one message")
        for msg in self.messages:
            msg.validate()
        for enum in self.enums:
            enum.validate()

    def render(self) -> str:
        """Validate the whole tree and render it as proto3 source text.

        Raises ProtoValidationError on the first structural problem found; no
        partial output is produced.
        """
        self.validate()
        return render_template(
            "proto_file.proto.j2",
            package=self.package,
            java_package=self.java_package,
            imports=self.imports,
            enums=[enum.render(0) for enum in self.enums],
            messages=[msg.render(0) for msg in self.messages],
        )
