"""Tests for Schema declaration and queries."""

from typing import Any

import pytest

from fielddefs import FieldDescriptor, FieldNotFoundError, Schema


def test_field_called(field_defs: Schema):
    """Test that a declared field can be retrieved by name."""
    field = field_defs.field_called("age")
    assert isinstance(field, FieldDescriptor)
    assert field.name == "age"
    assert field.schema is field_defs


@pytest.mark.parametrize("name", ["", None, "shoe_size"])
def test_field_called_absent(field_defs: Schema, name: Any):
    """Test that empty or unknown names yield None."""
    assert field_defs.field_called(name) is None


def test_fields_called(field_defs: Schema):
    """Test that several fields are resolved in the requested order."""
    fields = field_defs.fields_called(["zodiac_sign", "name"])
    assert [f.name for f in fields] == ["zodiac_sign", "name"]


def test_fields_called_raises_on_first_unknown(field_defs: Schema):
    """Test that an unknown name raises instead of being skipped."""
    with pytest.raises(FieldNotFoundError) as exc_info:
        field_defs.fields_called(["name", "unknown", "also_unknown"])
    assert exc_info.value.field_name == "unknown"
    assert isinstance(exc_info.value, LookupError)


def test_all_fields_in_declaration_order(field_defs: Schema):
    """Test that all_fields keeps declaration order."""
    assert [f.name for f in field_defs.all_fields()] == [
        "name",
        "age",
        "calorie_intake",
        "auspicious_fortune",
        "zodiac_sign",
    ]
    assert len(field_defs) == 5
    assert "age" in field_defs
    assert [f.name for f in field_defs] == [f.name for f in field_defs.all_fields()]


def test_all_fields_labeled(field_defs: Schema):
    """Test that labelled fields match the fields looked up by name."""
    labeled = field_defs.all_fields_labeled("personality_trait")
    assert labeled == field_defs.fields_called(["auspicious_fortune", "zodiac_sign"])


def test_all_attributes(field_defs: Schema):
    """Test the name to human name mapping of all fields."""
    assert field_defs.all_attributes() == {
        "name": "Name",
        "age": "Age",
        "calorie_intake": "% Daily value USDA recommended intake",
        "auspicious_fortune": "Auspicious fortune",
        "zodiac_sign": "Zodiac sign",
    }


def test_all_attributes_labeled(field_defs: Schema):
    """Test the human name mapping restricted to a label."""
    assert field_defs.all_attributes_labeled("personality_trait") == {
        "auspicious_fortune": "Auspicious fortune",
        "zodiac_sign": "Zodiac sign",
    }
    assert field_defs.all_attributes_labeled("no_such_label") == {}


def test_all_attributes_is_cached_per_schema(field_defs: Schema, settings):
    """Test that each schema computes its own attribute mapping."""
    first = field_defs.all_attributes()
    field_defs.field_called("name").human_name("Full name")
    assert field_defs.all_attributes() == first

    other = Schema(object, lambda s: s.field("colour"), settings=settings)
    assert other.all_attributes() == {"colour": "Colour"}


def test_all_attributes_refreshes_after_new_field(field_defs: Schema):
    """Test that declaring a field refreshes the cached mapping."""
    field_defs.all_attributes()
    field_defs.field("shoe_size")
    assert field_defs.all_attributes()["shoe_size"] == "Shoe size"


def test_human_name(field_defs: Schema):
    """Test both the default and an overridden human name."""
    assert field_defs.field_called("name").human_name() == "Name"
    assert field_defs.field_called("calorie_intake").human_name() == "% Daily value USDA recommended intake"


def test_display_proc(field_defs: Schema):
    """Test both the default and an overridden display callable."""
    assert field_defs.field_called("age").display_proc()(5) == "5 years old"
    assert field_defs.field_called("name").display_proc()("Hi") == "Hi"


def test_writer_proc(field_defs: Schema, model_me):
    """Test the default and a custom writer."""
    field_defs.field_called("age").writer_proc()(model_me, 5)
    assert model_me.age == 5

    field_defs.field_called("zodiac_sign").writer_proc()(model_me, "not Aquarius")
    assert model_me.birth_month == 6


def test_reader_proc(field_defs: Schema, model_me, model_you):
    """Test the default and a custom reader."""
    assert field_defs.field_called("age").reader_proc()(model_me) == 24
    assert field_defs.field_called("zodiac_sign").reader_proc()(model_me) == "not Aquarius"
    assert field_defs.field_called("zodiac_sign").reader_proc()(model_you) == "possibly Aquarius"


def test_zodiac_round_trip(field_defs: Schema, model_me):
    """Test that a written zodiac sign reads back, and follows the birth month."""
    zodiac = field_defs.field_called("zodiac_sign")
    zodiac.writer_proc()(model_me, "not Aquarius")
    assert model_me.birth_month == 6
    assert zodiac.reader_proc()(model_me) == "not Aquarius"

    model_me.birth_month = 1
    assert zodiac.reader_proc()(model_me) == "possibly Aquarius"


def test_has_label(field_defs: Schema):
    """Test label membership."""
    assert not field_defs.field_called("age").has_label("personality_trait")
    assert field_defs.field_called("zodiac_sign").has_label("personality_trait")


def test_display_for(field_defs: Schema, model_me):
    """Test that display_for composes the reader and display callables."""
    assert field_defs.display_for(model_me, "age") == "24 years old"
    assert field_defs.display_for(model_me, "name") == "Jacob"
    assert field_defs.display_for(model_me, "zodiac_sign") == "not Aquarius"
    with pytest.raises(FieldNotFoundError):
        field_defs.display_for(model_me, "shoe_size")


def test_redeclaring_field_replaces_descriptor(field_defs: Schema):
    """Test that declaring a name again overwrites the earlier descriptor."""
    original = field_defs.field_called("age")
    replacement = field_defs.field("age")
    assert replacement is not original
    assert field_defs.field_called("age") is replacement
    assert replacement.display_proc()(5) == 5
    assert [f.name for f in field_defs.all_fields()].count("age") == 1


def test_field_configure_callback(settings):
    """Test that field() passes the new descriptor to the configure callback."""
    schema = Schema(
        object,
        lambda s: s.field("birthday", lambda f: f.human_name("Birthday").label("dates")),
        settings=settings,
    )
    birthday = schema.field_called("birthday")
    assert birthday.human_name() == "Birthday"
    assert birthday.has_label("dates")


def test_field_rejects_empty_name(field_defs: Schema):
    """Test that a field needs a name."""
    with pytest.raises(ValueError, match="non-empty"):
        field_defs.field("")


def test_subject_type(field_defs: Schema, model_me):
    """Test that the schema and its fields expose the subject type."""
    assert field_defs.subject_type is type(model_me)
    assert field_defs.field_called("name").subject_type is type(model_me)
