from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from protoc_writer.errors import SchemaLoadError, ProtoValidationError
from protoc_writer.loader import load_proto_file_path


def run(input_path: str, output_path: Optional[str] = None) -> str:
    """Main pipeline: load the schema description, validate, render, write.

    Returns the rendered proto text. Without an output path the text goes to
    stdout.
    """
    if not Path(input_path).is_file():
        print(f"Schema file not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    try:
        proto_file = load_proto_file_path(input_path)
        text = proto_file.render()
    except (SchemaLoadError, ProtoValidationError) as e:
        print(f"FATAL: {e}", file=sys.stderr)
        sys.exit(1)

    if output_path is None:
        sys.stdout.write(text)
        return text

    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    Path(output_path).write_text(text, encoding="utf-8")
    print(
        f"Generated {output_path}: {len(proto_file.messages)} message(s), "
        f"{len(proto_file.enums)} enum(s)"
    )
    return text


def main():
    parser = argparse.ArgumentParser(
        description="Render a proto3 file from a JSON schema description",
    )
    parser.add_argument(
        "--input",
        required=True,
        help="Path to the JSON schema description",
    )
    parser.add_argument(
        "--output",
        default=None,
        help="Path of the .proto file to write (default: stdout)",
    )

    args = parser.parse_args()
    run(args.input, args.output)


if __name__ == "__main__":
    main()
