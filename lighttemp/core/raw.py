"""RAW companion decoding with rawpy.

The RAW (e.g. DNG) file is developed with the camera's own as-shot white
balance into 8-bit sRGB, so its average colour is comparable with the
processed photo. rawpy applies the file's flip flag, so the developed
image is upright. The as-shot multipliers are returned alongside.
"""

from __future__ import annotations

from pathlib import Path

import rawpy
from PIL import Image

from lighttemp.core.errors import UnreadableImage


def load_raw(path: str | Path) -> tuple[Image.Image, list[float]]:
    """Develop a RAW file into a Pillow RGB image plus as-shot WB multipliers."""
    path_obj = Path(path)
    if not path_obj.exists():
        raise FileNotFoundError(f'RAW file not found: {path}')

    try:
        with rawpy.imread(str(path_obj)) as raw:
            as_shot_wb = [float(v) for v in raw.camera_whitebalance]
            rgb = raw.postprocess(
                use_camera_wb=True,
                no_auto_bright=True,
                output_bps=8,
            )
    except rawpy.LibRawError as e:
        raise UnreadableImage(f'cannot decode RAW file {path}: {e}') from e
    return Image.fromarray(rgb).convert('RGB'), as_shot_wb
