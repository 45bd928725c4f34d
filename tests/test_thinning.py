"""Tests for the Zhang-Suen sub-iteration and the convergence driver."""

from __future__ import annotations

import cv2
import numpy as np
import pytest

from skelmat.cv.thinning import deletion_marker, thinning, thinning_iteration, thinning_passes
from skelmat.schema.errors import PreconditionViolation


def _block_image() -> np.ndarray:
    # 3x3 foreground block inside a one-pixel background border
    img = np.zeros((5, 5), np.uint8)
    img[1:4, 1:4] = 1
    return img


def _random_blobs(seed: int, shape=(48, 64)) -> np.ndarray:
    rng = np.random.default_rng(seed)
    noise = (rng.random(shape) > 0.55).astype(np.uint8) * 255
    return cv2.dilate(noise, np.ones((3, 3), np.uint8))


def _foreground(img: np.ndarray) -> int:
    return int(np.count_nonzero(img))


# ---------------------------------------------------------------------------
# Single sub-iteration
# ---------------------------------------------------------------------------


class TestThinningIteration:
    def test_block_first_subiteration(self) -> None:
        img = _block_image()
        thinning_iteration(img, 0)
        assert sorted(zip(*np.nonzero(img))) == [(1, 2), (2, 1), (2, 2)]

    def test_block_full_pass_keeps_only_centre(self) -> None:
        img = _block_image()
        thinning_iteration(img, 0)
        thinning_iteration(img, 1)
        for corner in [(1, 1), (1, 3), (3, 1), (3, 3)]:
            assert img[corner] == 0
        assert img[2, 2] == 1
        assert _foreground(img) == 1

    def test_marker_reads_without_writing(self) -> None:
        img = _block_image()
        before = img.copy()
        marker = deletion_marker(img, 0)
        assert np.array_equal(img, before)
        assert marker.dtype == np.uint8
        assert set(np.unique(marker)) <= {0, 1}

    def test_marker_border_is_clear(self) -> None:
        img = np.ones((6, 7), np.uint8)
        for it in (0, 1):
            marker = deletion_marker(img, it)
            assert not marker[0, :].any() and not marker[-1, :].any()
            assert not marker[:, 0].any() and not marker[:, -1].any()

    def test_border_pixels_never_change(self) -> None:
        img = (_random_blobs(3, (20, 30)) // 255).astype(np.uint8)
        img[0, :] = 1
        img[:, -1] = 1
        ref = img.copy()
        for it in (0, 1, 0, 1):
            thinning_iteration(img, it)
            assert np.array_equal(img[0, :], ref[0, :])
            assert np.array_equal(img[-1, :], ref[-1, :])
            assert np.array_equal(img[:, 0], ref[:, 0])
            assert np.array_equal(img[:, -1], ref[:, -1])

    def test_one_pixel_line_is_untouched(self) -> None:
        img = np.zeros((9, 15), np.uint8)
        img[4, 2:13] = 1
        ref = img.copy()
        thinning_iteration(img, 0)
        thinning_iteration(img, 1)
        assert np.array_equal(img, ref)

    @pytest.mark.parametrize("bad_iter", [-1, 2])
    def test_invalid_subiteration(self, bad_iter: int) -> None:
        with pytest.raises(PreconditionViolation, match="0 or 1"):
            thinning_iteration(_block_image(), bad_iter)


# ---------------------------------------------------------------------------
# Convergence driver
# ---------------------------------------------------------------------------


class TestThinningDriver:
    def test_background_converges_in_one_pass(self) -> None:
        out, passes = thinning_passes(np.zeros((10, 12), np.uint8))
        assert passes == 1
        assert not out.any()

    def test_block_converges_to_centre_point(self) -> None:
        out, passes = thinning_passes(_block_image() * 255)
        assert passes == 2
        assert out[2, 2] == 255
        assert _foreground(out) == 1

    def test_output_is_rescaled(self) -> None:
        out = thinning(_random_blobs(1))
        assert out.dtype == np.uint8
        assert set(np.unique(out)) <= {0, 255}

    def test_input_not_modified(self) -> None:
        src = _random_blobs(2)
        ref = src.copy()
        thinning(src)
        assert np.array_equal(src, ref)

    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_idempotent(self, seed: int) -> None:
        once = thinning(_random_blobs(seed))
        twice = thinning(once)
        assert np.array_equal(once, twice)

    @pytest.mark.parametrize("seed", [4, 5])
    def test_skeleton_is_subset_of_input(self, seed: int) -> None:
        src = _random_blobs(seed)
        out = thinning(src)
        assert not np.any((out > 0) & (src == 0))

    def test_foreground_never_grows(self) -> None:
        img = _random_blobs(6) // 255
        count = _foreground(img)
        for _ in range(40):
            for it in (0, 1):
                thinning_iteration(img, it)
                now = _foreground(img)
                assert now <= count
                count = now

    def test_thick_bar_reduces_to_thin_skeleton(self) -> None:
        src = np.zeros((40, 90), np.uint8)
        src[10:30, 10:80] = 255
        out = thinning(src)
        ys, xs = np.nonzero(out)
        assert len(ys) > 0
        assert len(ys) < 0.1 * _foreground(src)
        assert ys.min() >= 10 and ys.max() < 30
        assert xs.min() >= 10 and xs.max() < 80

    def test_non_binary_values_truncate(self) -> None:
        src = _block_image() * 254
        out, passes = thinning_passes(src)
        assert passes == 1
        assert not out.any()


# ---------------------------------------------------------------------------
# Preconditions
# ---------------------------------------------------------------------------


class TestPreconditions:
    @pytest.mark.parametrize("shape", [(3, 10), (10, 3), (3, 3)])
    def test_too_small(self, shape) -> None:
        with pytest.raises(PreconditionViolation, match="at least 4x4"):
            thinning(np.zeros(shape, np.uint8))

    def test_multichannel_rejected(self) -> None:
        with pytest.raises(PreconditionViolation, match="single-channel"):
            thinning(np.zeros((8, 8, 3), np.uint8))

    def test_non_8bit_rejected(self) -> None:
        with pytest.raises(PreconditionViolation, match="8-bit"):
            thinning(np.zeros((8, 8), np.float32))

    def test_violation_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            thinning_iteration(np.zeros((2, 2), np.uint8), 0)
