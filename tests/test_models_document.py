import pytest

from models.document import (
    DIAGNOSTIC_SEPARATOR,
    Orientation,
    OutputMode,
    PageSize,
    RenderRequest,
    RenderResult,
)


@pytest.mark.parametrize(
    "value,expected",
    [
        ("P", Orientation.PORTRAIT),
        ("l", Orientation.LANDSCAPE),
        ("landscape", Orientation.LANDSCAPE),
        (Orientation.LANDSCAPE, Orientation.LANDSCAPE),
        (None, Orientation.PORTRAIT),
        ("diagonal", Orientation.PORTRAIT),
    ],
)
def test_orientation_coerce(value, expected):
    assert Orientation.coerce(value) is expected


def test_page_size_coerce_defaults_to_a4(caplog):
    assert PageSize.coerce("letter") is PageSize.LETTER
    assert PageSize.coerce("") is PageSize.A4
    with caplog.at_level("WARNING"):
        assert PageSize.coerce("B9") is PageSize.A4
    assert "Unknown page size" in caplog.text


def test_output_mode_flags():
    assert OutputMode.FILE_INLINE.writes_file and OutputMode.FILE_INLINE.returns_bytes
    assert OutputMode.FILE.writes_file and not OutputMode.FILE.returns_bytes
    assert not OutputMode.STRING.writes_file and OutputMode.STRING.returns_bytes


def test_request_paths_and_coercion():
    req = RenderRequest("<p>x</p>", "out/surat.v2", orientation="L", page_size="a3")

    assert req.pdf_path == "out/surat.v2.pdf"
    assert req.raw_path == "out/surat.v2_asli"
    assert req.orientation is Orientation.LANDSCAPE
    assert req.page_size is PageSize.A3


def test_result_constructors_and_echo():
    req = RenderRequest("<p>x</p>", "out/a")

    ok = RenderResult.succeeded(req, pdf_bytes=b"pdf")
    assert ok.ok and ok.pdf_path == "out/a.pdf" and ok.raw_path is None
    assert ok.diagnostic_echo() == ""
    assert "pdf_bytes" not in ok.to_dict()

    bad = RenderResult.failed(req, "boom")
    assert not bad.ok and bad.raw_path == "out/a_asli" and bad.pdf_path is None
    assert bad.diagnostic_echo() == "<p>x</p>" + DIAGNOSTIC_SEPARATOR + "boom"
