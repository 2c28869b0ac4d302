"""
File Validator Tests
"""

from types import SimpleNamespace

import pytest

from almantzod.validation import ConfigurationError, FileDescriptor, FileValidator

MB = 1024 * 1024


@pytest.fixture
def image_validator():
    """PNG/JPG up to 5 MB."""
    return FileValidator().type(["png", "jpg"]).max_size(5)


def test_single_descriptor(image_validator):
    result = image_validator.validate({"type": "image/png", "size": MB})
    assert result.valid
    assert result.data == FileDescriptor("image/png", MB)


def test_accepts_descriptor_objects(image_validator):
    upload = SimpleNamespace(content_type="image/jpeg", size=10)
    assert image_validator.validate(upload).data == FileDescriptor("image/jpeg", 10)


def test_whole_float_size(image_validator):
    result = image_validator.validate({"type": "image/png", "size": 1024.0})
    assert result.data == FileDescriptor("image/png", 1024)
    assert type(result.data.size) is int


def test_legacy_jpg_mime_type(image_validator):
    assert image_validator.validate(FileDescriptor("image/jpg", 10)).valid


def test_wrong_type(image_validator):
    result = image_validator.validate({"type": "application/pdf", "size": 10})
    assert result.errors == ["file must be of type: png, jpg"]


def test_too_large(image_validator):
    result = image_validator.validate({"type": "image/png", "size": 5 * MB + 1}, field_name="avatar")
    assert result.errors == ["avatar size must not exceed 5 MB"]


def test_every_rule_runs(image_validator):
    result = image_validator.validate({"type": "text/plain", "size": 6 * MB})
    assert len(result.errors) == 2


def test_custom_messages():
    validator = FileValidator().type("pdf", message="PDF only").maxSize(1, message="Too big")
    result = validator.validate({"type": "image/png", "size": 2 * MB})
    assert result.errors == ["PDF only", "Too big"]


@pytest.mark.parametrize("value", [
    "file.png",
    42,
    {"type": "image/png"},
    {"size": 3},
    {"type": "image/png", "size": 1.5},
    {"type": "image/png", "size": float("nan")},
])
def test_invalid_format(value):
    result = FileValidator().validate(value)
    assert result.errors == ["file invalid format"]


def test_unknown_extension_fails_at_configuration():
    validator = FileValidator()
    with pytest.raises(ConfigurationError, match="exe"):
        validator.type(["png", "exe"])
    assert validator.rules == ()


def test_configured_extension(config):
    config.set("files.mime_types", {"csv": "text/csv"})
    validator = FileValidator().type(["csv"])
    assert validator.validate({"type": "text/csv", "size": 1}).valid


def test_required_and_nullable():
    assert FileValidator().validate(None).errors == ["file is required"]
    assert FileValidator().validate([]).errors == ["file is required"]
    result = FileValidator().nullable().validate([])
    assert result.valid
    assert result.data is None


class TestMultipleFiles:
    """Multi-file mode."""

    def test_all_valid(self, image_validator):
        files = [
            {"type": "image/png", "size": MB},
            FileDescriptor("image/jpeg", 2 * MB),
        ]
        result = image_validator.validate(files)
        assert result.valid
        assert result.data == [
            FileDescriptor("image/png", MB),
            FileDescriptor("image/jpeg", 2 * MB),
        ]

    def test_single_element_list_stays_a_list(self, image_validator):
        result = image_validator.validate([{"type": "image/png", "size": 1}])
        assert result.data == [FileDescriptor("image/png", 1)]

    def test_one_bad_file_fails_the_batch(self, image_validator):
        files = [
            {"type": "image/png", "size": MB},
            {"type": "image/png", "size": 6 * MB},
        ]
        result = image_validator.validate(files, field_name="photos")
        assert not result.valid
        assert result.data is None
        assert result.errors == ["photos 1 size must not exceed 5 MB"]

    def test_bad_shape_is_indexed(self, image_validator):
        result = image_validator.validate([{"type": "image/png", "size": 1}, "oops"])
        assert result.errors == ["file 1 invalid format"]


def test_result_serializes_descriptors(image_validator):
    result = image_validator.validate({"type": "image/png", "size": 3})
    assert result.to_json() == '{"valid":true,"data":{"type":"image/png","size":3}}'
