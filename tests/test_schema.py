"""
Object Schema Tests
"""

import pytest

from almantzod import az
from almantzod.validation import ConfigurationError, ObjectSchema, ValidationError


@pytest.fixture
def signup_schema():
    """Typical signup form."""
    return az.object({
        "name": az.string().min(2),
        "email": az.email(),
        "age": az.integer().min(18),
        "password": az.password().min(8).contains_number(),
    })


def test_valid_payload(signup_schema):
    result = signup_schema.parse_data({
        "name": "  Ada ",
        "email": "ada@example.com",
        "age": "36",
        "password": "engine123",
    })
    assert result.valid
    assert result.data == {
        "name": "Ada",
        "email": "ada@example.com",
        "age": 36,
        "password": "engine123",
    }
    assert result.errors == {}


def test_single_field_failure():
    schema = az.object({"age": az.integer().min(18)})
    result = schema.parse_data({"age": 15})
    assert not result.valid
    assert result.errors == {"age": "age must be greater than or equal to 18"}


def test_only_first_error_per_field(signup_schema):
    result = signup_schema.parse_data({
        "name": "Ada",
        "email": "ada@example.com",
        "age": 20,
        "password": "short",
    })
    assert result.errors == {"password": "password must be at least 8 characters long."}


def test_every_field_is_validated(signup_schema):
    result = signup_schema.parse_data({"name": "A", "age": "x"})
    assert set(result.errors) == {"name", "email", "age", "password"}
    assert result.errors["email"] == "email is required"


def test_missing_keys_are_none():
    schema = az.object({"nickname": az.string().nullable()})
    result = schema.parse_data({})
    assert result.valid
    assert result.data == {"nickname": None}


def test_password_confirmation_mismatch(signup_schema):
    result = signup_schema.parse_data({
        "name": "Ada",
        "email": "ada@example.com",
        "age": 20,
        "password": "x",
        "password_confirmation": "y",
    })
    assert result.errors["password_confirmation"] == "Password do not match"
    assert result.errors["password"] == "password must be at least 8 characters long."


def test_password_confirmation_match():
    schema = az.object({"password": az.password()})
    result = schema.parse_data({"password": "secret", "password_confirmation": "secret"})
    assert result.valid
    assert result.data == {"password": "secret"}


def test_confirmation_not_checked_without_password_field():
    schema = az.object({"name": az.string()})
    assert schema.parse_data({"name": "a", "password": "x", "password_confirmation": "y"}).valid


def test_confirmation_field_error_takes_precedence():
    schema = az.object({
        "password": az.password(),
        "password_confirmation": az.password().min(10),
    })
    result = schema.parse_data({"password": "secret", "password_confirmation": "other"})
    assert result.errors == {
        "password_confirmation": "password_confirmation must be at least 10 characters long."
    }


def test_parse_data_alias(signup_schema):
    assert signup_schema.parseData({}) == signup_schema.parse_data({})


def test_parse_or_fail():
    schema = az.object({"age": az.integer()})
    assert schema.parse_or_fail({"age": "3"}) == {"age": 3}
    with pytest.raises(ValidationError) as exc_info:
        schema.parse_or_fail({"age": "x"})
    assert exc_info.value.first("age") == "age must be an integer"


def test_rejects_non_mapping_input():
    with pytest.raises(TypeError):
        az.object({"a": az.string()}).parse_data(["a"])


def test_rejects_non_validators():
    with pytest.raises(ConfigurationError, match="age"):
        ObjectSchema({"age": 18})


def test_fields_are_fixed_after_construction():
    fields = {"a": az.string()}
    schema = ObjectSchema(fields)
    fields["b"] = az.integer()
    assert list(schema.fields) == ["a"]
    with pytest.raises(TypeError):
        schema.fields["c"] = az.boolean()


def test_result_to_dict():
    schema = az.object({"age": az.integer()})
    assert schema.parse_data({"age": "x"}).to_dict() == {
        "valid": False,
        "errors": {"age": "age must be an integer"},
    }
