"""Build a ProtoFile from a plain schema description (e.g. decoded JSON).

Expected layout:

    {
      "package": "foo",
      "java_package": "com.example.foo",
      "imports": ["google/protobuf/timestamp.proto"],
      "enums": [{"name": "Country", "values": [{"name": "US", "tag": 0}]}],
      "messages": [
        {
          "name": "Beacon",
          "comment": "...",
          "reserved": ["old_name", 3, [6, 9]],
          "fields": [
            {"name": "tags", "type": "string", "tag": 1, "rule": "repeated"},
            {"name": "extra", "map_key": "string", "type": "Event", "tag": 2}
          ],
          "oneofs": [{"name": "kind", "fields": [...]}],
          "messages": [...],
          "enums": [...]
        }
      ]
    }

A field with "map_key" becomes a map field; its "type" (or a plain field's
"type") picks the builtin variant when it is a scalar keyword and the custom
variant otherwise.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from protoc_writer.errors import SchemaLoadError
from protoc_writer.scalar_types import FieldRule, FieldType, field_type_from_keyword
from protoc_writer.schema.enumeration import ProtoEnum, ProtoEnumValue
from protoc_writer.schema.fields import CustomField, CustomMapField, Field, MapField, ScalarField
from protoc_writer.schema.message import ProtoMessage
from protoc_writer.schema.oneof import ProtoOneOf
from protoc_writer.schema.proto_file import ProtoFile
from protoc_writer.schema.reserved import Reserved, ReservedName, ReservedTagRange, ReservedTagValue

_RULES: Dict[str, FieldRule] = {
    "": FieldRule.NONE,
    "none": FieldRule.NONE,
    "repeated": FieldRule.REPEATED,
}


def load_proto_file_path(file_path: str) -> ProtoFile:
    """Read a JSON schema description from disk and build a ProtoFile."""
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaLoadError(f"{file_path}: cannot read schema: {e}") from e
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaLoadError(f"{file_path}: invalid JSON: {e}") from e
    return load_proto_file(data)


def load_proto_file(data: Dict[str, Any]) -> ProtoFile:
    """Build a ProtoFile from an already decoded schema description."""
    _expect_dict(data, "<root>")
    return ProtoFile(
        package=_get_str(data, "package", "<root>"),
        java_package=_get_str(data, "java_package", "<root>"),
        imports=[
            _expect_str(imp, f"imports[{i}]")
            for i, imp in enumerate(_get_list(data, "imports", "<root>"))
        ],
        messages=[
            _load_message(m, f"messages[{i}]")
            for i, m in enumerate(_get_list(data, "messages", "<root>"))
        ],
        enums=[
            _load_enum(e, f"enums[{i}]")
            for i, e in enumerate(_get_list(data, "enums", "<root>"))
        ],
    )


def _load_message(data: Any, path: str) -> ProtoMessage:
    _expect_dict(data, path)
    return ProtoMessage(
        name=_get_str(data, "name", path),
        comment=_get_str(data, "comment", path),
        messages=[
            _load_message(m, f"{path}.messages[{i}]")
            for i, m in enumerate(_get_list(data, "messages", path))
        ],
        reserved_values=[
            _load_reserved(r, f"{path}.reserved[{i}]")
            for i, r in enumerate(_get_list(data, "reserved", path))
        ],
        fields=[
            _load_field(f, f"{path}.fields[{i}]")
            for i, f in enumerate(_get_list(data, "fields", path))
        ],
        oneofs=[
            _load_oneof(o, f"{path}.oneofs[{i}]")
            for i, o in enumerate(_get_list(data, "oneofs", path))
        ],
        enums=[
            _load_enum(e, f"{path}.enums[{i}]")
            for i, e in enumerate(_get_list(data, "enums", path))
        ],
    )


def _load_enum(data: Any, path: str) -> ProtoEnum:
    _expect_dict(data, path)
    values: List[ProtoEnumValue] = []
    for i, v in enumerate(_get_list(data, "values", path)):
        value_path = f"{path}.values[{i}]"
        _expect_dict(v, value_path)
        values.append(
            ProtoEnumValue(
                name=_get_str(v, "name", value_path),
                tag=_get_int(v, "tag", value_path),
                comment=_get_str(v, "comment", value_path),
            )
        )
    return ProtoEnum(
        name=_get_str(data, "name", path),
        values=values,
        allow_alias=_get_bool(data, "allow_alias", path),
        comment=_get_str(data, "comment", path),
    )


def _load_oneof(data: Any, path: str) -> ProtoOneOf:
    _expect_dict(data, path)
    return ProtoOneOf(
        name=_get_str(data, "name", path),
        fields=[
            _load_field(f, f"{path}.fields[{i}]")
            for i, f in enumerate(_get_list(data, "fields", path))
        ],
        comment=_get_str(data, "comment", path),
    )


def _load_reserved(data: Any, path: str) -> Reserved:
    # bool is an int subclass; true/false are not field numbers.
    if isinstance(data, bool):
        raise SchemaLoadError(f"{path}: reserved entry cannot be a boolean")
    if isinstance(data, str):
        return ReservedName(name=data)
    if isinstance(data, int):
        return ReservedTagValue(tag=data)
    if isinstance(data, list) and len(data) == 2 and all(
        isinstance(x, int) and not isinstance(x, bool) for x in data
    ):
        return ReservedTagRange(lower_tag=data[0], upper_tag=data[1])
    raise SchemaLoadError(
        f"{path}: reserved entry must be a name, a tag or a [lower, upper] pair, got {data!r}"
    )


def _load_field(data: Any, path: str) -> Field:
    _expect_dict(data, path)
    name = _get_str(data, "name", path)
    tag = _get_int(data, "tag", path)
    type_name = _get_str(data, "type", path)
    if type_name == "":
        raise SchemaLoadError(f"{path}: field '{name}' has no type")
    comment = _get_str(data, "comment", path)

    rule_name = _get_str(data, "rule", path)
    if rule_name not in _RULES:
        raise SchemaLoadError(f"{path}: unknown field rule '{rule_name}'")
    rule = _RULES[rule_name]

    builtin = _builtin_type(type_name)

    if "map_key" in data:
        key_name = _get_str(data, "map_key", path)
        key_typing = _builtin_type(key_name)
        if key_typing is None:
            raise SchemaLoadError(f"{path}: map key type '{key_name}' is not a scalar type")
        if builtin is not None:
            return MapField(name=name, tag=tag, key_typing=key_typing, value_typing=builtin,
                            rule=rule, comment=comment)
        return CustomMapField(name=name, tag=tag, key_typing=key_typing, value_typing=type_name,
                              rule=rule, comment=comment)

    if builtin is not None:
        return ScalarField(name=name, tag=tag, typing=builtin, rule=rule, comment=comment)
    return CustomField(name=name, tag=tag, typing=type_name, rule=rule, comment=comment)


def _builtin_type(keyword: str) -> Optional[FieldType]:
    try:
        return field_type_from_keyword(keyword)
    except KeyError:
        return None


def _expect_dict(data: Any, path: str) -> None:
    if not isinstance(data, dict):
        raise SchemaLoadError(f"{path}: expected an object, got {type(data).__name__}")


def _expect_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise SchemaLoadError(f"{path}: expected a string, got {value!r}")
    return value


def _get_bool(data: Dict[str, Any], key: str, path: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise SchemaLoadError(f"{path}.{key}: expected true or false, got {value!r}")
    return value


def _get_str(data: Dict[str, Any], key: str, path: str) -> str:
    value = data.get(key, "")
    if value is None:
        return ""
    if not isinstance(value, str):
        raise SchemaLoadError(f"{path}.{key}: expected a string, got {value!r}")
    return value


def _get_int(data: Dict[str, Any], key: str, path: str) -> int:
    if key not in data:
        raise SchemaLoadError(f"{path}: missing required '{key}'")
    value = data[key]
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaLoadError(f"{path}.{key}: expected an integer, got {value!r}")
    return value


def _get_list(data: Dict[str, Any], key: str, path: str) -> List[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise SchemaLoadError(f"{path}.{key}: expected a list, got {type(value).__name__}")
    return value
