import pytest

from protoc_writer.errors import ProtoValidationError
from protoc_writer.scalar_types import MAX_FIELD_TAG, FieldRule, FieldType
from protoc_writer.schema.fields import CustomField, CustomMapField, MapField, ScalarField


class TestScalarField:
    def test_valid(self):
        ScalarField(name="MyMap", tag=1, typing=FieldType.STRING).validate()

    def test_empty_name(self):
        with pytest.raises(ProtoValidationError, match="non-empty name"):
            ScalarField(name="", tag=1, typing=FieldType.STRING).validate()

    def test_tag_zero_is_accepted(self):
        ScalarField(name="id", tag=0, typing=FieldType.INT32).validate()

    def test_negative_tag(self):
        with pytest.raises(ProtoValidationError, match="id"):
            ScalarField(name="id", tag=-1, typing=FieldType.INT32).validate()

    def test_tag_above_field_number_range(self):
        ScalarField(name="id", tag=MAX_FIELD_TAG, typing=FieldType.INT32).validate()
        with pytest.raises(ProtoValidationError):
            ScalarField(name="id", tag=MAX_FIELD_TAG + 1, typing=FieldType.INT32).validate()

    def test_render(self):
        field = ScalarField(name="Continent", tag=11, typing=FieldType.STRING)
        assert field.render() == "string Continent = 11;"

    def test_render_repeated_with_comment(self):
        field = ScalarField(name="Continent", tag=21, typing=FieldType.STRING,
                            rule=FieldRule.REPEATED, comment="Where am I?")
        assert field.render() == "repeated string Continent = 21;   // Where am I?"

    def test_render_unknown_type_is_empty_token(self):
        field = ScalarField(name="odd", tag=3, typing=99)
        assert field.render() == " odd = 3;"


class TestCustomField:
    def test_valid(self):
        CustomField(name="sub_message", tag=25, typing="Event").validate()

    def test_empty_name(self):
        with pytest.raises(ProtoValidationError):
            CustomField(name="", tag=25, typing="Event").validate()

    def test_negative_tag(self):
        with pytest.raises(ProtoValidationError):
            CustomField(name="sub_message", tag=-5, typing="Event").validate()

    def test_render(self):
        field = CustomField(name="Habitat", tag=10, typing="string",
                            rule=FieldRule.REPEATED, comment="What am I?")
        assert field.render() == "repeated string Habitat = 10;   // What am I?"

    def test_render_imported_type(self):
        field = CustomField(name="created_at", tag=2, typing="google.protobuf.Timestamp")
        assert field.render() == "google.protobuf.Timestamp created_at = 2;"


class TestMapField:
    @pytest.mark.parametrize("key_typing", [
        FieldType.INT32, FieldType.INT64, FieldType.UINT32, FieldType.UINT64,
        FieldType.SINT32, FieldType.SINT64, FieldType.FIXED32, FieldType.FIXED64,
        FieldType.SFIXED32, FieldType.SFIXED64, FieldType.BOOL, FieldType.STRING,
    ])
    def test_legal_key_types(self, key_typing):
        MapField(name="m", tag=1, key_typing=key_typing, value_typing=FieldType.STRING).validate()

    @pytest.mark.parametrize("key_typing", [FieldType.DOUBLE, FieldType.FLOAT, FieldType.BYTES])
    def test_illegal_key_types(self, key_typing):
        field = MapField(name="LanguageMap", tag=1, key_typing=key_typing,
                         value_typing=FieldType.STRING)
        with pytest.raises(ProtoValidationError, match="Map field LanguageMap"):
            field.validate()

    def test_out_of_range_key_type(self):
        with pytest.raises(ProtoValidationError):
            MapField(name="m", tag=1, key_typing=99, value_typing=FieldType.STRING).validate()

    def test_negative_value_type(self):
        with pytest.raises(ProtoValidationError, match="map value"):
            MapField(name="m", tag=1, key_typing=FieldType.STRING, value_typing=-1).validate()

    def test_repeated_is_forbidden(self):
        field = MapField(name="m", tag=1, key_typing=FieldType.STRING,
                         value_typing=FieldType.STRING, rule=FieldRule.REPEATED)
        with pytest.raises(ProtoValidationError, match="repeated"):
            field.validate()

    def test_empty_name(self):
        with pytest.raises(ProtoValidationError):
            MapField(name="", tag=1, key_typing=FieldType.STRING,
                     value_typing=FieldType.STRING).validate()

    def test_render(self):
        field = MapField(name="LanguageMap", tag=22, key_typing=FieldType.STRING,
                         value_typing=FieldType.STRING, comment="Super essential")
        assert field.render() == "map<string, string> LanguageMap = 22;   // Super essential"

    def test_render_mixed_types(self):
        field = MapField(name="counts", tag=4, key_typing=FieldType.SINT64,
                         value_typing=FieldType.FIXED32)
        assert field.render() == "map<sint64, fixed32> counts = 4;"


class TestCustomMapField:
    def test_valid(self):
        CustomMapField(name="CustomMap", tag=23, key_typing=FieldType.STRING,
                       value_typing="Event").validate()

    @pytest.mark.parametrize("key_typing", [
        FieldType.INT32, FieldType.INT64, FieldType.UINT32, FieldType.UINT64,
        FieldType.SINT32, FieldType.SINT64, FieldType.FIXED32, FieldType.FIXED64,
        FieldType.SFIXED32, FieldType.SFIXED64, FieldType.BOOL, FieldType.STRING,
    ])
    def test_legal_key_types(self, key_typing):
        CustomMapField(name="CustomMap", tag=23, key_typing=key_typing,
                       value_typing="Event").validate()

    @pytest.mark.parametrize("key_typing", [FieldType.DOUBLE, FieldType.FLOAT, FieldType.BYTES])
    def test_illegal_key_types(self, key_typing):
        field = CustomMapField(name="CustomMap", tag=23, key_typing=key_typing,
                               value_typing="Event")
        with pytest.raises(ProtoValidationError, match="Map field CustomMap"):
            field.validate()

    def test_repeated_is_forbidden(self):
        field = CustomMapField(name="CustomMap", tag=23, key_typing=FieldType.STRING,
                               value_typing="Event", rule=FieldRule.REPEATED)
        with pytest.raises(ProtoValidationError, match="repeated"):
            field.validate()

    def test_render(self):
        field = CustomMapField(name="CustomMap", tag=23, key_typing=FieldType.STRING,
                               value_typing="Event")
        assert field.render() == "map<string, Event> CustomMap = 23;"
