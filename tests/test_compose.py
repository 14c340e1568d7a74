"""Unit tests for cvdraw.compose: copy, join_images and combine_images."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from cvdraw import (
    DrawError,
    ImageRef,
    ImageRefNotInImage,
    IncompatibleImageSizes,
    combine_images,
    copy,
    join_images,
)

# ======================================================================
# copy
# ======================================================================


class TestCopy:
    def test_whole_image(self) -> None:
        src = np.arange(6, dtype=np.uint8).reshape(2, 3)
        dst = np.zeros((4, 4), dtype=np.uint8)
        assert copy(src, dst) == ImageRef(3, 2)
        assert (dst[:2, :3] == src).all()
        assert not dst[2:].any() and not dst[:, 3].any()

    def test_offsets_and_clipping(self) -> None:
        src = np.arange(16, dtype=np.int32).reshape(4, 4)
        dst = np.zeros((3, 3), dtype=np.int32)
        copied = copy(src, dst, size=(10, 10), src_offset=(1, 2), dst_offset=(1, 0))
        assert copied == ImageRef(2, 2)
        assert dst[0:2, 1:3].tolist() == [[9, 10], [13, 14]]
        assert dst[2].tolist() == [0, 0, 0]

    def test_negative_destination_offset(self) -> None:
        src = np.arange(9, dtype=np.uint8).reshape(3, 3)
        dst = np.zeros((3, 3), dtype=np.uint8)
        assert copy(src, dst, dst_offset=(-1, -1)) == ImageRef(2, 2)
        assert dst[:2, :2].tolist() == [[4, 5], [7, 8]]

    def test_converts_to_destination_dtype(self) -> None:
        src = np.full((2, 2), 2.75)
        dst = np.zeros((2, 2), dtype=np.uint8)
        copy(src, dst)
        assert (dst == 2).all()


# ======================================================================
# join_images
# ======================================================================


class TestJoinImages:
    def test_taller_right(self) -> None:
        a = np.ones((2, 3), dtype=np.uint8)
        b = np.full((4, 2), 2, dtype=np.uint8)
        joined = join_images(a, b)
        assert joined.shape == (4, 5)
        assert joined.tolist() == [
            [1, 1, 1, 2, 2],
            [1, 1, 1, 2, 2],
            [0, 0, 0, 2, 2],
            [0, 0, 0, 2, 2],
        ]

    def test_taller_left(self) -> None:
        a = np.full((3, 2), 7, dtype=np.uint8)
        b = np.full((1, 1), 9, dtype=np.uint8)
        joined = join_images(a, b)
        assert joined.tolist() == [[7, 7, 9], [7, 7, 0], [7, 7, 0]]

    @pytest.mark.parametrize("seed", range(4))
    def test_regions(self, seed: int) -> None:
        rng = np.random.default_rng(seed)
        ha, wa, hb, wb = rng.integers(0, 6, size=4).tolist()
        a = rng.integers(1, 100, size=(ha, wa, 3), dtype=np.uint8)
        b = rng.integers(1, 100, size=(hb, wb, 3), dtype=np.uint8)
        joined = join_images(a, b)
        assert joined.shape == (max(ha, hb), wa + wb, 3)
        assert (joined[:ha, :wa] == a).all()
        assert (joined[:hb, wa:] == b).all()
        assert not joined[ha:, :wa].any()
        assert not joined[hb:, wa:].any()

    def test_result_dtype(self) -> None:
        a = np.ones((1, 1), dtype=np.uint8)
        b = np.ones((1, 1), dtype=np.float32)
        assert join_images(a, b).dtype == np.float32
        assert join_images(a, b, dtype=np.uint16).dtype == np.uint16

    def test_layout_mismatch(self) -> None:
        with pytest.raises(IncompatibleImageSizes, match="join_images"):
            join_images(np.zeros((2, 2)), np.zeros((2, 2, 3)))


# ======================================================================
# combine_images
# ======================================================================


class TestCombineImages:
    def test_region_is_added(self) -> None:
        a = np.full((4, 4), 10, dtype=np.uint8)
        out = a.copy()
        b = np.full((2, 2), 5, dtype=np.uint8)
        assert combine_images(a, b, out, dst=ImageRef(1, 1), size=ImageRef(2, 2)) == ImageRef(2, 2)
        expected = np.full((4, 4), 10, dtype=np.uint8)
        expected[1:3, 1:3] = 15
        assert (out == expected).all()
        assert (a == 10).all()

    def test_default_size_is_all_of_b(self) -> None:
        a = np.zeros((5, 5), dtype=np.int32)
        out = np.empty_like(a)
        b = np.arange(6, dtype=np.int32).reshape(2, 3)
        combine_images(a, b, out, dst=(2, 1))
        assert (out[1:3, 2:5] == b).all()
        assert out.sum() == b.sum()

    def test_out_aliases_a(self) -> None:
        a = np.ones((3, 3), dtype=np.int16)
        b = np.full((3, 3), 2, dtype=np.int16)
        combine_images(a, b, a, from_=(1, 1))
        assert a.tolist() == [[3, 3, 1], [3, 3, 1], [1, 1, 1]]

    def test_from_offset(self) -> None:
        a = np.zeros((2, 2), dtype=np.int32)
        out = np.zeros_like(a)
        b = np.arange(9, dtype=np.int32).reshape(3, 3)
        combine_images(a, b, out, size=(2, 2), from_=(1, 1))
        assert out.tolist() == [[4, 5], [7, 8]]

    def test_size_clamped_to_images(self) -> None:
        a = np.zeros((4, 4), dtype=np.int32)
        out = np.zeros_like(a)
        b = np.ones((10, 10), dtype=np.int32)
        assert combine_images(a, b, out, dst=(2, 3), size=(50, 50)) == ImageRef(2, 1)
        assert out.sum() == 2
        assert out[3, 2:].tolist() == [1, 1]

    def test_size_clamped_by_b(self) -> None:
        a = np.zeros((4, 4), dtype=np.int32)
        out = np.zeros_like(a)
        b = np.ones((2, 2), dtype=np.int32)
        assert combine_images(a, b, out, size=(4, 4), from_=(1, 0)) == ImageRef(1, 2)

    @pytest.mark.parametrize("seed", range(4))
    def test_additive_inside_region_only(self, seed: int) -> None:
        rng = np.random.default_rng(seed)
        a = rng.integers(0, 50, size=(6, 7), dtype=np.int32)
        b = rng.integers(0, 50, size=(5, 5), dtype=np.int32)
        out = np.zeros_like(a)
        dst = ImageRef(*rng.integers(0, 6, size=2).tolist())
        src = ImageRef(*rng.integers(0, 5, size=2).tolist())
        size = ImageRef(*rng.integers(1, 8, size=2).tolist())
        w, h = combine_images(a, b, out, dst=dst, size=size, from_=src)
        expected = a.copy()
        expected[dst.y : dst.y + h, dst.x : dst.x + w] += b[src.y : src.y + h, src.x : src.x + w]
        assert (out == expected).all()

    def test_integer_overflow_wraps(self) -> None:
        a = np.full((1, 1), 250, dtype=np.uint8)
        b = np.full((1, 1), 10, dtype=np.uint8)
        out = np.zeros_like(a)
        combine_images(a, b, out)
        assert out[0, 0] == 4

    def test_rgb(self) -> None:
        a = np.zeros((2, 2, 3), dtype=np.uint8)
        b = np.full((1, 1, 3), (1, 2, 3), dtype=np.uint8)
        out = np.zeros_like(a)
        combine_images(a, b, out, dst=(1, 1))
        assert out[1, 1].tolist() == [1, 2, 3]
        assert out.sum() == 6

    def test_dst_outside_a(self) -> None:
        a = np.zeros((3, 3))
        with pytest.raises(ImageRefNotInImage, match="combine_images"):
            combine_images(a, a, a.copy(), dst=(3, 0))

    def test_negative_from(self) -> None:
        a = np.zeros((3, 3))
        with pytest.raises(ImageRefNotInImage):
            combine_images(a, a, a.copy(), from_=(-1, 0))

    def test_size_mismatch(self) -> None:
        a = np.zeros((3, 3))
        with pytest.raises(IncompatibleImageSizes) as excinfo:
            combine_images(a, a, np.zeros((3, 4)))
        assert isinstance(excinfo.value, DrawError)
        assert excinfo.value.function == "combine_images"
        assert str(excinfo.value) == "Incompatible image sizes in combine_images"

    def test_clamping_is_logged(self, caplog) -> None:
        a = np.zeros((2, 2), dtype=np.int32)
        with caplog.at_level(logging.DEBUG, logger="cvdraw.compose"):
            combine_images(a, np.ones((3, 3), dtype=np.int32), a)
        assert "clamped" in caplog.text
