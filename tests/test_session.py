"""Tests for EditSession: rebasing from the original, history and errors."""

from unittest.mock import MagicMock

import pytest
from PIL import Image

from conftest import make_image
from editopia.errors import EncodeWriteFailure, InvalidImage, NoImageLoaded, OutOfRange
from editopia.services import io as Sio, transforms as Sx
from editopia.services.transforms import FilterKind
from editopia.session import EditSession

NAMED = [FilterKind.WARM, FilterKind.COOL, FilterKind.VINTAGE, FilterKind.SEPIA,
         FilterKind.BLACK_AND_WHITE]


def same(a, b):
    return a.size == b.size and a.tobytes() == b.tobytes()


class TestLoad:

    def test_load_initializes_state(self, session, photo):
        assert same(session.original, photo)
        assert same(session.edited, photo)
        assert session.edited is not session.original
        assert session.history_size() == 0
        assert session.active_filter is FilterKind.NONE
        assert session.exposure == 1.0
        assert session.saturation == 1.0

    def test_load_keeps_an_owned_copy(self, photo):
        s = EditSession()
        s.load(photo)
        photo.putpixel((0, 0), (1, 2, 3))
        assert s.original.getpixel((0, 0)) != (1, 2, 3)

    def test_load_flattens_alpha_on_black(self):
        s = EditSession()
        src = Image.new("RGBA", (3, 1))
        src.putdata([(10, 20, 30, 40), (200, 100, 50, 0), (7, 8, 9, 255)])
        s.load(src)
        assert s.original.mode == "RGB"
        semi, clear, opaque = s.edited.getdata()
        assert all(abs(a - b) <= 1 for a, b in zip(semi, (2, 3, 5)))
        assert clear == (0, 0, 0)
        assert opaque == (7, 8, 9)

    def test_zero_size_is_rejected_and_session_unchanged(self, session, photo):
        session.apply_filter(FilterKind.SEPIA)
        edited = session.edited
        with pytest.raises(InvalidImage):
            session.load(Image.new("RGB", (0, 4)))
        assert session.edited is edited
        assert same(session.original, photo)
        assert session.history_size() == 1

    def test_reload_resets_everything(self, session, quad):
        session.apply_filter(FilterKind.WARM)
        session.adjust_saturation(0.5)
        session.load(quad)
        assert session.history_size() == 0
        assert session.active_filter is FilterKind.NONE
        assert session.saturation == 1.0
        assert same(session.edited, quad)

    def test_open_from_disk(self, tmp_path, quad):
        path = tmp_path / "quad.png"
        quad.save(path)
        s = EditSession()
        s.open(str(path))
        assert s.path == str(path)
        assert same(s.original, quad)

    def test_open_undecodable(self, tmp_path):
        path = tmp_path / "broken.jpg"
        path.write_bytes(b"definitely not a jpeg")
        s = EditSession()
        with pytest.raises(InvalidImage):
            s.open(str(path))
        assert not s.has_image()


class TestApplyFilter:

    def test_filter_recomputes_from_original(self, session, photo):
        session.apply_filter(FilterKind.WARM)
        session.apply_filter(FilterKind.SEPIA)
        assert same(session.edited, Sx.sepia(photo))
        assert session.active_filter is FilterKind.SEPIA
        assert session.history_size() == 2

    def test_filter_pushes_previous_edited(self, session, photo):
        session.apply_filter(FilterKind.COOL)
        session.undo()
        assert same(session.edited, photo)

    def test_black_and_white_twice_is_stable(self, session):
        session.apply_filter(FilterKind.BLACK_AND_WHITE)
        first = session.edited
        session.apply_filter(FilterKind.BLACK_AND_WHITE)
        assert same(session.edited, first)

    def test_filter_discards_adjustments(self, session, photo):
        session.adjust_exposure(2.0)
        session.apply_filter(FilterKind.VINTAGE)
        assert same(session.edited, Sx.vintage(photo))

    def test_none_resets_with_single_push(self, session, photo):
        session.apply_filter(FilterKind.WARM)
        session.adjust_exposure(1.5)
        session.apply_filter(FilterKind.NONE)
        assert same(session.edited, photo)
        assert session.active_filter is FilterKind.NONE
        assert session.exposure == 1.0
        assert session.history_size() == 2
        session.undo()
        assert same(session.edited, Sx.exposure(photo, 1.5))

    def test_failed_transform_leaves_state(self, session, monkeypatch):
        edited = session.edited
        monkeypatch.setitem(Sx.FILTERS, FilterKind.SEPIA, MagicMock(side_effect=MemoryError))
        with pytest.raises(MemoryError):
            session.apply_filter(FilterKind.SEPIA)
        assert session.edited is edited
        assert session.history_size() == 0


class TestHistoryBound:

    def test_eleven_filters_then_undo(self, session, photo):
        kinds = [NAMED[i % len(NAMED)] for i in range(11)]
        for kind in kinds:
            session.apply_filter(kind)
        assert session.history_size() == 10
        for _ in range(10):
            assert session.undo()
        # снимок исходника вытеснен, остаётся результат первого фильтра
        assert same(session.edited, Sx.apply_filter(kinds[0], photo))
        last = session.edited
        assert not session.undo()
        assert session.edited is last

    def test_undo_on_empty_history_is_noop(self, session):
        edited = session.edited
        assert not session.undo()
        assert session.edited is edited

    def test_undo_does_not_push_current(self, session):
        session.apply_filter(FilterKind.WARM)
        session.apply_filter(FilterKind.COOL)
        session.undo()
        assert session.history_size() == 1


class TestAdjustments:

    def test_exposure_from_original(self, session, photo):
        session.adjust_exposure(2.0)
        session.adjust_exposure(1.0)
        assert same(session.edited, photo)
        assert session.exposure == 1.0

    def test_saturation_from_original(self, session, photo):
        session.apply_filter(FilterKind.SEPIA)
        session.adjust_saturation(0.0)
        assert same(session.edited, Sx.saturation(photo, 0.0))
        assert session.saturation == 0.0

    def test_adjustments_do_not_touch_history(self, session):
        session.adjust_exposure(1.3)
        session.adjust_saturation(1.7)
        assert session.history_size() == 0

    @pytest.mark.parametrize("factor", [0.05, 0.10, 0.0, -1.0, 3.01, float("nan")])
    def test_exposure_out_of_range(self, session, factor):
        edited = session.edited
        with pytest.raises(OutOfRange):
            session.adjust_exposure(factor)
        assert session.edited is edited
        assert session.exposure == 1.0

    @pytest.mark.parametrize("factor", [0.11, 3.0])
    def test_exposure_bounds_accepted(self, session, factor):
        assert session.adjust_exposure(factor)

    @pytest.mark.parametrize("factor", [-0.01, 2.01])
    def test_saturation_out_of_range(self, session, factor):
        edited = session.edited
        with pytest.raises(OutOfRange, match="saturation"):
            session.adjust_saturation(factor)
        assert session.edited is edited

    @pytest.mark.parametrize("factor", [0.0, 2.0])
    def test_saturation_bounds_accepted(self, session, factor):
        assert session.adjust_saturation(factor)


class TestReset:

    def test_reset_restores_original(self, session, photo):
        session.apply_filter(FilterKind.VINTAGE)
        session.adjust_exposure(2.5)
        session.adjust_saturation(0.2)
        assert session.reset()
        assert same(session.edited, photo)
        assert session.active_filter is FilterKind.NONE
        assert (session.exposure, session.saturation) == (1.0, 1.0)

    def test_reset_keeps_history(self, session):
        session.apply_filter(FilterKind.WARM)
        session.reset()
        assert session.history_size() == 1


class TestNoImage:

    def test_operations_are_noops(self):
        s = EditSession()
        assert not s.apply_filter(FilterKind.WARM)
        assert not s.apply_filter(FilterKind.NONE)
        assert not s.adjust_exposure(0.01)
        assert not s.adjust_saturation(1.0)
        assert not s.undo()
        assert not s.reset()
        assert s.edited is None

    def test_export_requires_image(self):
        with pytest.raises(NoImageLoaded):
            EditSession().export()


class TestExport:

    def test_export_hands_over_unmodified_pixels(self, session, photo, monkeypatch):
        save = MagicMock()
        monkeypatch.setattr(Sio, "save_image", save)
        path = session.export()
        assert path == "/photos/edited_beach.png"
        (target, img), _ = save.call_args
        assert target == path
        assert same(img, photo)

    def test_export_writes_jpeg(self, tmp_path, quad):
        src = tmp_path / "quad.png"
        quad.save(src)
        s = EditSession()
        s.open(str(src))
        out = s.export()
        assert out == str(tmp_path / "edited_quad.png")
        with Image.open(out) as written:
            assert written.format == "JPEG"
            assert written.size == (2, 2)

    def test_export_failure_keeps_state(self, session, tmp_path):
        session.apply_filter(FilterKind.SEPIA)
        edited = session.edited
        with pytest.raises(EncodeWriteFailure):
            session.export(str(tmp_path / "missing" / "out.jpg"))
        assert session.edited is edited
        assert session.history_size() == 1

    def test_in_memory_load_exports_default_name(self, quad, monkeypatch):
        save = MagicMock()
        monkeypatch.setattr(Sio, "save_image", save)
        s = EditSession()
        s.load(quad)
        assert s.export() == "edited_image.jpg"
