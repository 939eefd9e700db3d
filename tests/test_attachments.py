from types import SimpleNamespace

from services.attachments import EncodedAttachment, decode_preview, encode_attachment, encode_uploaded_file


def test_encode_attachment_builds_base64_and_preview():
    encoded = encode_attachment("scan.jpg", b"\x89PNG")

    assert encoded.mime_type == "image/jpeg"
    assert encoded.data == "iVBORw=="
    assert encoded.preview == "data:image/jpeg;base64,iVBORw=="
    assert decode_preview(encoded.preview) == b"\x89PNG"


def test_unknown_extension_falls_back_to_png():
    encoded = encode_attachment("blob", b"x")

    assert encoded.mime_type == "image/png"


def test_encode_uploaded_file_prefers_reported_type():
    uploaded = SimpleNamespace(name="report", type="image/webp", getvalue=lambda: b"abc")

    encoded = encode_uploaded_file(uploaded)

    assert encoded.name == "report"
    assert encoded.mime_type == "image/webp"
    assert encoded.data == "YWJj"


def test_decode_preview_rejects_non_data_uris():
    assert decode_preview("https://example.com/x.png") is None
    assert decode_preview("data:image/png;base64,@@@") is None


def test_preview_docstring_is_well_formed():
    assert EncodedAttachment.preview.__doc__.startswith("``data:`` URI")
