import pytest

from src.car_search.errors import InvalidMediaType, MissingInput, PayloadTooLarge, UploadError
from src.car_search.media.upload import MAX_UPLOAD_BYTES, validate_upload
from src.car_search.types import UploadArtifact


def artifact(size=10, media_type="image/jpeg"):
    return UploadArtifact(byte_size=size, media_type=media_type, content=b"x" * min(size, 10))


def test_limit_is_five_mebibytes():
    assert MAX_UPLOAD_BYTES == 5 * 1024 * 1024


def test_valid_image_passes():
    assert validate_upload(artifact()) is None


def test_missing_artifact():
    with pytest.raises(MissingInput, match="No file provided"):
        validate_upload(None)


@pytest.mark.parametrize("media_type", [None, "", "application/pdf", "text/plain", "video/mp4", "IMAGE/png", "xy-image/png"])
def test_non_image_media_type_rejected(media_type):
    with pytest.raises(InvalidMediaType, match="Please upload an image file"):
        validate_upload(artifact(media_type=media_type))


@pytest.mark.parametrize("media_type", ["image/png", "image/jpeg", "image/webp", "image/heic"])
def test_image_media_types_accepted(media_type):
    validate_upload(artifact(media_type=media_type))


def test_exactly_at_limit_passes():
    validate_upload(artifact(size=MAX_UPLOAD_BYTES))


def test_one_byte_over_limit_rejected():
    with pytest.raises(PayloadTooLarge, match="smaller than 5MB"):
        validate_upload(artifact(size=MAX_UPLOAD_BYTES + 1))


def test_custom_limit():
    with pytest.raises(PayloadTooLarge):
        validate_upload(artifact(size=2 * 1024 * 1024 + 1), max_bytes=2 * 1024 * 1024)


def test_media_type_checked_before_size():
    with pytest.raises(InvalidMediaType):
        validate_upload(artifact(size=MAX_UPLOAD_BYTES * 2, media_type="application/pdf"))


def test_upload_errors_share_base_class():
    for exc in (MissingInput, InvalidMediaType, PayloadTooLarge):
        assert issubclass(exc, UploadError)
