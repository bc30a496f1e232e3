"""Capture pipeline: photo (+ RAW companion) → samples → technique → Report.

A capture is loaded once into a CaptureResult and passed straight down
this chain. Nothing is stashed between steps, so a missing RAW companion
is visible as `capture.has_raw` rather than as stale state.

Both images are upright before cropping: the photo by its EXIF
Orientation tag, the RAW by rawpy's flip handling.
"""

from __future__ import annotations

import os

from PIL import Image, ImageOps, UnidentifiedImageError

from lighttemp import registry
from lighttemp.core.config import Settings
from lighttemp.core.errors import UnreadableImage
from lighttemp.core.raw import load_raw
from lighttemp.core.types import CaptureResult, Report, Sample

Region = tuple[str, tuple[int, int, int, int]]


def load_capture(photo_path: str, raw_path: str | None = None) -> CaptureResult:
    """Decode the processed photo and, if given, its RAW companion."""
    if not os.path.isfile(photo_path):
        raise FileNotFoundError(f'image not found: {photo_path}')
    try:
        with Image.open(photo_path) as opened:
            photo = ImageOps.exif_transpose(opened).convert('RGB')
    except (UnidentifiedImageError, OSError) as e:
        raise UnreadableImage(f'cannot decode image {photo_path}: {e}') from e

    capture = CaptureResult(photo_path=photo_path, photo=photo)
    if raw_path:
        raw_image, white_balance = load_raw(raw_path)
        capture.raw_path = raw_path
        capture.raw = raw_image
        capture.raw_white_balance = white_balance
    return capture


def _crop(image: Image.Image, name: str, bounds: tuple[int, int, int, int]) -> Image.Image:
    x1, y1, x2, y2 = bounds
    if not (0 <= x1 < x2 <= image.width and 0 <= y1 < y2 <= image.height):
        raise ValueError(f'Region {name!r} {list(bounds)} lies outside the {image.width}x{image.height} image')
    return image.crop(bounds)


def build_samples(capture: CaptureResult, regions: list[Region] | None = None) -> list[Sample]:
    """Crop each region from the photo, and from the RAW companion if present.

    Without regions the whole photo is one sample named 'full'.
    """
    samples = []
    if regions:
        for name, bounds in regions:
            samples.append(Sample(name=name, bounds=bounds, image=_crop(capture.photo, name, bounds)))
    else:
        photo = capture.photo
        samples.append(Sample(name='full', bounds=(0, 0, photo.width, photo.height), image=photo))

    if capture.has_raw:
        raw = capture.raw
        photo = capture.photo
        if (raw.width > raw.height and photo.width < photo.height) or (
            raw.width < raw.height and photo.width > photo.height
        ):
            raise ValueError(
                f'RAW companion is {raw.width}x{raw.height} but the photo is {photo.width}x{photo.height}; '
                'their orientations differ'
            )
        # RAW development can differ in size from the processed photo; scale the bounds
        sx = raw.width / capture.photo.width
        sy = raw.height / capture.photo.height
        for photo_sample in list(samples):
            x1, y1, x2, y2 = photo_sample.bounds
            bounds = (round(x1 * sx), round(y1 * sy), round(x2 * sx), round(y2 * sy))
            name = f'raw:{photo_sample.name}'
            samples.append(
                Sample(
                    name=name,
                    bounds=bounds,
                    image=_crop(raw, name, bounds),
                    source='raw',
                    white_balance=capture.raw_white_balance,
                )
            )
    return samples


def run(
    capture: CaptureResult,
    technique_name: str,
    settings: Settings,
    regions: list[Region] | None = None,
) -> Report:
    """Run one technique over a capture and return the populated report."""
    samples = build_samples(capture, regions)
    report = Report(
        image_path=capture.photo_path,
        image_width=capture.photo.width,
        image_height=capture.photo.height,
        raw_path=capture.raw_path,
    )
    for s in samples:
        report.set_bounds(s.name, s.bounds, source=s.source)

    tech = registry.get(technique_name)
    tech.execute(samples, report, settings)
    return report
