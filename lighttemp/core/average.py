"""Average colour of an image.

Averages every pixel by default. With max_samples > 0, a fixed-seed random
subset of that many pixels is averaged instead, so large captures stay fast
and repeated runs agree.
"""

import numpy as np
from PIL import Image

from lighttemp.core.errors import EmptyImage
from lighttemp.core.types import RGBColor


def average_colour(image: Image.Image, max_samples: int = 0) -> RGBColor:
    if image.width == 0 or image.height == 0:
        raise EmptyImage(f'Cannot average an empty {image.width}x{image.height} image')
    pixels = np.array(image.convert('RGB')).reshape(-1, 3)

    if max_samples > 0 and len(pixels) > max_samples:
        indices = np.random.default_rng(42).choice(len(pixels), max_samples, replace=False)
        pixels = pixels[indices]

    # float64 mean: uint8 sums would overflow
    mean = pixels.astype(np.float64).mean(axis=0)
    r, g, b = (int(round(float(c))) for c in mean)
    return RGBColor(r, g, b)
