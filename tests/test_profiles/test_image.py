from __future__ import annotations

import base64
from pathlib import Path
from unittest.mock import Mock

import pytest

from chatprofile.config.models import IconConfig
from chatprofile.profiles import ImageSource, ImageSourceAdapter, MalformedImageError
from chatprofile.profiles.image import validate_raster, validate_vector


def test_render_placeholder_for_missing_image() -> None:
    for image in (None, ImageSource(data=None, type="vector")):
        view = ImageSourceAdapter(image).render()
        assert view.placeholder is True
        assert view.data is None


def test_render_reflects_current_payload(svg_markup: str) -> None:
    view = ImageSourceAdapter(ImageSource(data=svg_markup, type="vector")).render()

    assert view.placeholder is False
    assert view.type == "vector"
    assert view.data == svg_markup
    assert view.summary.startswith("vector image")


def test_replace_vector_emits_new_image(svg_markup: str) -> None:
    on_change = Mock()
    adapter = ImageSourceAdapter(None, on_image_change=on_change)

    assert adapter.replace(svg_markup, "vector") is True

    on_change.assert_called_once_with(ImageSource(data=svg_markup, type="vector"))
    assert adapter.render().placeholder is False


def test_replace_raster_accepts_plain_and_data_url(png_base64: str) -> None:
    on_change = Mock()
    adapter = ImageSourceAdapter(None, on_image_change=on_change)

    assert adapter.replace(png_base64, "raster") is True
    assert adapter.replace(f"data:image/png;base64,{png_base64}", "raster") is True
    assert on_change.call_count == 2


@pytest.mark.parametrize(
    "markup",
    [
        "",
        "<svg><circle></svg>",
        '<html xmlns="http://www.w3.org/1999/xhtml"></html>',
        '<svg xmlns="http://www.w3.org/2000/svg"><script>alert(1)</script></svg>',
        '<!DOCTYPE svg [<!ENTITY x "y">]><svg>&x;</svg>',
    ],
)
def test_malformed_vector_is_rejected_before_draft(markup: str) -> None:
    on_change = Mock()
    adapter = ImageSourceAdapter(None, on_image_change=on_change)

    with pytest.raises(MalformedImageError) as exc_info:
        adapter.replace(markup, "vector")

    assert exc_info.value.image_type == "vector"
    on_change.assert_not_called()


def test_vector_size_limit() -> None:
    markup = '<svg xmlns="http://www.w3.org/2000/svg">' + "<g/>" * 100 + "</svg>"

    validate_vector(markup, max_bytes=10_000)
    with pytest.raises(MalformedImageError, match="limit"):
        validate_vector(markup, max_bytes=64)


def test_validate_raster_detects_format(png_base64: str) -> None:
    assert validate_raster(png_base64) == "png"
    jpeg = base64.b64encode(b"\xff\xd8\xff\xe0" + b"\x00" * 8).decode("ascii")
    assert validate_raster(jpeg) == "jpeg"


@pytest.mark.parametrize(
    "data",
    [
        "",
        "not base64!!",
        base64.b64encode(b"plain text").decode("ascii"),
        "data:image/png;base64",
    ],
)
def test_validate_raster_rejects_bad_payloads(data: str) -> None:
    with pytest.raises(MalformedImageError):
        validate_raster(data)


def test_remove_clears_data_and_keeps_type(svg_markup: str) -> None:
    on_change = Mock()
    adapter = ImageSourceAdapter(ImageSource(data=svg_markup, type="vector"), on_image_change=on_change)

    assert adapter.remove() is True
    assert adapter.remove() is False

    on_change.assert_called_once_with(ImageSource(data=None, type="vector"))
    assert adapter.render().placeholder is True


def test_remove_can_reset_type(svg_markup: str) -> None:
    on_change = Mock()
    adapter = ImageSourceAdapter(
        ImageSource(data=svg_markup, type="vector"),
        on_image_change=on_change,
        config=IconConfig(reset_type_on_remove=True),
    )

    adapter.remove()

    on_change.assert_called_once_with(ImageSource(data=None, type="raster"))


def test_read_only_adapter_never_emits(svg_markup: str, png_base64: str) -> None:
    on_change = Mock()
    adapter = ImageSourceAdapter(
        ImageSource(data=svg_markup, type="vector"),
        on_image_change=on_change,
        read_only=True,
    )

    assert adapter.replace(png_base64, "raster") is False
    assert adapter.remove() is False
    assert adapter.render().data == svg_markup
    on_change.assert_not_called()


def test_load_file_by_suffix(tmp_path: Path, svg_markup: str, png_bytes: bytes) -> None:
    svg_path = tmp_path / "icon.svg"
    svg_path.write_text(svg_markup, encoding="utf-8")
    png_path = tmp_path / "icon.PNG"
    png_path.write_bytes(png_bytes)
    on_change = Mock()
    adapter = ImageSourceAdapter(None, on_image_change=on_change)

    assert adapter.load_file(svg_path) is True
    assert adapter.image.type == "vector"
    assert adapter.load_file(png_path) is True
    assert adapter.image == ImageSource(data=base64.b64encode(png_bytes).decode("ascii"), type="raster")


def test_load_file_rejects_unknown_suffix(tmp_path: Path) -> None:
    path = tmp_path / "icon.bmp"
    path.write_bytes(b"BM")

    with pytest.raises(MalformedImageError, match="Unsupported icon file type"):
        ImageSourceAdapter(None, on_image_change=Mock()).load_file(path)


def test_load_file_rejects_svg_that_is_not_utf8(tmp_path: Path) -> None:
    path = tmp_path / "bad.svg"
    path.write_bytes(b"<svg>\xff\xfe</svg>")
    on_change = Mock()

    with pytest.raises(MalformedImageError, match="not UTF-8") as excinfo:
        ImageSourceAdapter(None, on_image_change=on_change).load_file(path)

    assert excinfo.value.image_type == "vector"
    on_change.assert_not_called()
