import io
import logging

import numpy as np
import pytest
from PIL import Image as PILImage

from kodak import (
    Colour,
    Dim,
    Image,
    InvalidArgumentError,
    Loc,
    OutOfBoundsError,
    PixelBuffer,
    Region,
)

from ..utils import gradient, pixels, solid

logger = logging.getLogger(__name__)


@pytest.mark.parametrize("dim", [Dim(0, 0), Dim(1, 0), Dim(0, 1), Dim(7, 3)])
def test_blank_with_colour(dim: Dim) -> None:
    colour = Colour(1, 2, 3, 4)
    image = Image.blank_with_colour(dim, colour)
    assert image.dimensions() == dim
    assert image.size == (dim.w, dim.h)
    assert all(
        image.get_pixel(Loc(x, y)) == colour for y in range(dim.h) for x in range(dim.w)
    )


def test_blank_is_black() -> None:
    assert Image.blank(Dim(2, 2)) == solid(2, 2, Colour.BLACK)


def test_blank_negative() -> None:
    with pytest.raises(InvalidArgumentError):
        Image.blank(Dim(-1, 2))


def test_get_pixel_out_of_bounds() -> None:
    image = Image.blank(Dim(2, 2))
    with pytest.raises(OutOfBoundsError):
        image.get_pixel(Loc(2, 0))


def test_get_pixel_tuple() -> None:
    assert Image.blank(Dim(2, 2)).get_pixel((1, 1)) == Colour.BLACK


def test_as_region() -> None:
    assert Image.blank(Dim(3, 4)).as_region() == Region(Loc(0, 0), Dim(3, 4))


def test_overlay_concrete(black_canvas: Image, white_square: Image) -> None:
    result = black_canvas.overlay(white_square, Loc(1, 1))
    B = (0, 0, 0, 255)
    W = (255, 255, 255, 255)
    assert pixels(result) == [
        [B, B, B, B],
        [B, W, W, B],
        [B, W, W, B],
        [B, B, B, B],
    ]


def test_overlay_non_out_of_bounds() -> None:
    original = Image.blank_with_colour(Dim.square(10), Colour.WHITE)
    result = original.overlay(Image.blank(Dim.square(5)), Loc(0, 0))

    assert result.get_pixel(Loc(0, 0)) == Colour.BLACK
    assert result.get_pixel(Loc(4, 0)) == Colour.BLACK
    assert result.get_pixel(Loc(0, 4)) == Colour.BLACK
    assert result.get_pixel(Loc(4, 4)) == Colour.BLACK
    assert result.get_pixel(Loc(0, 5)) == Colour.WHITE
    assert result.get_pixel(Loc(5, 0)) == Colour.WHITE


def test_overlay_out_of_bounds(black_canvas: Image, white_square: Image) -> None:
    result = black_canvas.overlay(white_square, (3, -1))
    assert result.get_pixel(Loc(3, 0)) == Colour.WHITE
    assert result.get_pixel(Loc(2, 0)) == Colour.BLACK
    assert result.get_pixel(Loc(3, 1)) == Colour.BLACK


def test_overlay_is_not_in_place(black_canvas: Image, white_square: Image) -> None:
    before = black_canvas.numpy()
    result = black_canvas.overlay(white_square, Loc(0, 0))
    assert result is not black_canvas
    assert np.array_equal(black_canvas.numpy(), before)


def test_overlay_type_error(black_canvas: Image) -> None:
    with pytest.raises(TypeError):
        black_canvas.overlay(black_canvas.numpy(), Loc(0, 0))  # type: ignore[arg-type]


def test_numpy_is_a_copy(black_canvas: Image) -> None:
    array = black_canvas.numpy()
    array[...] = 255
    assert black_canvas.get_pixel(Loc(0, 0)) == Colour.BLACK


def test_pixels_are_read_only(black_canvas: Image) -> None:
    with pytest.raises(ValueError):
        black_canvas._buffer.set(Loc(0, 0), Colour.WHITE)


def test_init_does_not_alias_array() -> None:
    base = np.zeros((2, 2, 4), dtype=np.uint8)
    image = Image(PixelBuffer(base[:]))
    base[...] = 255
    assert image.get_pixel(Loc(0, 0)) == Colour(0, 0, 0, 0)


def test_init_leaves_buffer_writable() -> None:
    buffer = PixelBuffer.create(Dim(2, 2))
    image = Image(buffer)
    assert not buffer.frozen
    buffer.set(Loc(0, 0), Colour.WHITE)
    assert buffer.get(Loc(0, 0)) == Colour.WHITE
    assert image.get_pixel(Loc(0, 0)) == Colour.BLACK


def test_fromarray_copies() -> None:
    array = np.zeros((2, 2, 4), dtype=np.uint8)
    image = Image.fromarray(array)
    array[...] = 255
    assert image.get_pixel(Loc(0, 0)) == Colour.TRANSPARENT


def test_fill(photo: Image) -> None:
    assert photo.fill(Colour.WHITE) == solid(photo.width, photo.height, Colour.WHITE)


def test_fill_region() -> None:
    image = Image.blank(Dim(20, 10)).fill_region(
        Region(Loc(10, 0), Dim(10, 10)), Colour.WHITE
    )
    assert image.get_pixel(Loc(5, 5)) == Colour.BLACK
    assert image.get_pixel(Loc(15, 5)) == Colour.WHITE


def test_crop(photo: Image) -> None:
    result = photo.crop(Region(Loc(1, 1), Dim(3, 2)))
    assert result.dimensions() == Dim(3, 2)
    assert np.array_equal(result.numpy(), photo.numpy()[1:3, 1:4])


def test_crop_corner_outside(photo: Image) -> None:
    with pytest.raises(InvalidArgumentError):
        photo.crop(Region(Loc(6, 0), Dim(1, 1)))


@pytest.mark.parametrize("width", [0, 1, 3])
def test_border(photo: Image, width: int) -> None:
    result = Image.blank_with_colour(
        photo.dimensions().expand(width), Colour.WHITE
    ).overlay(photo, Loc(width, width))
    assert result.dimensions() == Dim(photo.width + 2 * width, photo.height + 2 * width)
    assert result == photo.add_border(width)

    array = result.numpy()
    inner = array[width : width + photo.height, width : width + photo.width]
    assert np.array_equal(inner, photo.numpy())
    mask = np.ones(array.shape[:2], dtype=bool)
    mask[width : width + photo.height, width : width + photo.width] = False
    assert (array[mask] == Colour.WHITE.to_vec()).all()


def test_border_colour(photo: Image) -> None:
    result = photo.add_border(1, Colour(255, 0, 0))
    assert result.get_pixel(Loc(0, 0)) == Colour(255, 0, 0)


def test_chaining() -> None:
    result = (
        gradient(8, 8)
        .crop(Region.from_top_left(Dim.square(7)))
        .overlay(Image.blank_with_colour(Dim.square(5), Colour.WHITE), Loc(6, 6))
    )
    assert result.dimensions() == Dim(7, 7)
    assert result.get_pixel(Loc(6, 6)) == Colour.WHITE
    assert result.get_pixel(Loc(5, 6)) == gradient(8, 8).get_pixel(Loc(5, 6))


def test_equality() -> None:
    assert gradient(3, 3) == gradient(3, 3)
    assert gradient(3, 3) != gradient(3, 4)
    assert gradient(3, 3) != gradient(3, 3, alpha=10)
    assert Image.blank(Dim(0, 0)) == Image.blank(Dim(0, 0))
    assert gradient(1, 1) != "image"


def test_unhashable() -> None:
    with pytest.raises(TypeError):
        hash(Image.blank(Dim(1, 1)))


def test_frompil_converts_mode() -> None:
    image = Image.frompil(PILImage.new("RGB", (3, 2), (10, 20, 30)))
    assert image.dimensions() == Dim(3, 2)
    assert image.get_pixel(Loc(2, 1)) == Colour(10, 20, 30, 255)


def test_frompil_grayscale_alpha() -> None:
    image = Image.frompil(PILImage.new("LA", (1, 1), (100, 50)))
    assert image.get_pixel(Loc(0, 0)) == Colour(100, 100, 100, 50)


def test_topil(photo: Image) -> None:
    pil_image = photo.topil()
    assert pil_image.mode == "RGBA"
    assert pil_image.size == photo.size
    assert pil_image.getpixel((2, 3)) == tuple(photo.get_pixel(Loc(2, 3)))


def test_save_open_file_object(photo: Image) -> None:
    with io.BytesIO() as f:
        photo.save(f)
        assert f.getvalue().startswith(b"\x89PNG")
        f.seek(0)
        assert Image.open(f) == photo


def test_save_open_path(tmp_path, photo: Image) -> None:
    filename = tmp_path / "photo.png"
    photo.add_border(2).save(filename)
    assert Image.open(filename) == photo.add_border(2)
    assert Image.open(str(filename)).dimensions() == Dim(10, 9)


@pytest.mark.parametrize("alpha", [0, 1, 128, 255])
def test_png_round_trip(alpha: int) -> None:
    image = Image.blank_with_colour(Dim(4, 3), Colour(10, 200, 30, alpha)).overlay(
        gradient(2, 2, alpha=77), Loc(1, 1)
    )
    with io.BytesIO() as f:
        image.save(f, format="PNG")
        f.seek(0)
        decoded = Image.open(f)
    with io.BytesIO() as f:
        decoded.save(f)
        f.seek(0)
        assert Image.open(f) == image


def test_repr() -> None:
    assert repr(Image.blank(Dim(3, 2))) == "Image(size=3x2)"
