"""Tests for lighttemp.core.raw — RAW companion development via rawpy."""

from pathlib import Path

import numpy as np
import pytest
from lighttemp.core import raw as raw_module
from lighttemp.core.errors import UnreadableImage
from lighttemp.core.raw import load_raw


class FakeRaw:
    """Minimal stand-in for rawpy.RawPy used as a context manager."""

    def __init__(self):
        self.camera_whitebalance = [2.1, 1.0, 1.6, 0.0]
        self.postprocess_kwargs = None
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.closed = True
        return False

    def postprocess(self, **kwargs):
        self.postprocess_kwargs = kwargs
        return np.full((6, 8, 3), (90, 120, 200), dtype=np.uint8)


@pytest.fixture
def fake_rawpy(monkeypatch: pytest.MonkeyPatch) -> FakeRaw:
    fake = FakeRaw()
    monkeypatch.setattr(raw_module.rawpy, 'imread', lambda path: fake)
    return fake


class TestLoadRaw:
    def test_missing_file(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            load_raw(tmp_path / 'missing.dng')

    def test_develops_to_rgb_image(self, tmp_path: Path, fake_rawpy: FakeRaw):
        path = tmp_path / 'shot.dng'
        path.write_bytes(b'not really a dng')
        image, wb = load_raw(path)
        assert image.mode == 'RGB'
        assert image.size == (8, 6)
        assert image.getpixel((0, 0)) == (90, 120, 200)
        assert wb == [2.1, 1.0, 1.6, 0.0]

    def test_uses_camera_white_balance(self, tmp_path: Path, fake_rawpy: FakeRaw):
        path = tmp_path / 'shot.dng'
        path.write_bytes(b'x')
        load_raw(str(path))
        assert fake_rawpy.postprocess_kwargs['use_camera_wb'] is True
        assert fake_rawpy.postprocess_kwargs['output_bps'] == 8
        assert fake_rawpy.closed

    def test_corrupt_file_is_unreadable_image(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        def broken_imread(path):
            raise raw_module.rawpy.LibRawError('Input/output error')

        monkeypatch.setattr(raw_module.rawpy, 'imread', broken_imread)
        path = tmp_path / 'shot.dng'
        path.write_bytes(b'garbage')
        with pytest.raises(UnreadableImage, match='cannot decode RAW file'):
            load_raw(path)
