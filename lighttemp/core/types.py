"""Shared types for lighttemp: colours, Sample, CaptureResult, Technique, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from PIL import Image


@dataclass(frozen=True)
class RGBColor:
    """An 8-bit sRGB triplet, e.g. the average colour of a photo."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel, value in (('r', self.r), ('g', self.g), ('b', self.b)):
            # bool is an int subclass but never a channel value
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f'RGBColor.{channel} must be an int, got {value!r}')
            if not 0 <= value <= 255:
                raise ValueError(f'RGBColor.{channel} must be in [0, 255], got {value}')

    @property
    def hex(self) -> str:
        return f'#{self.r:02x}{self.g:02x}{self.b:02x}'

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class Tristimulus:
    """CIE XYZ tristimulus values."""

    X: float
    Y: float
    Z: float


@dataclass(frozen=True)
class ChromaticityPoint:
    """CIE xy chromaticity coordinates."""

    x: float
    y: float


@dataclass
class Sample:
    """A (possibly cropped) image ready for analysis."""

    name: str
    bounds: tuple[int, int, int, int]  # (x1, y1, x2, y2)
    image: Image.Image
    source: str = 'photo'  # 'photo' or 'raw'
    white_balance: list[float] | None = None  # as-shot multipliers, RAW only


@dataclass
class CaptureResult:
    """Everything one capture produced: the processed photo and its RAW companion.

    Built once by the pipeline and handed down the call chain; nothing keeps
    a reference to it after the report is produced.
    """

    photo_path: str
    photo: Image.Image
    raw_path: str | None = None
    raw: Image.Image | None = None
    raw_white_balance: list[float] | None = None

    @property
    def has_raw(self) -> bool:
        return self.raw is not None


class Technique:
    """A self-registering analysis technique.

    Usage in a technique module:

        technique = Technique(name='average', help='Average colour per sample')

        @technique.run
        def run(samples, report, settings):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, samples: list[Sample], report: Report, settings: Any) -> None:
        """Execute the technique's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Technique {self.name} has no run function')
        self._run_fn(samples, report, settings)


@dataclass
class Report:
    """Accumulates results from techniques for text/JSON output."""

    image_path: str = ''
    image_width: int = 0
    image_height: int = 0
    raw_path: str | None = None
    samples: dict[str, dict[str, Any]] = field(default_factory=dict)
    pass_count: int = 0
    fail_count: int = 0
    kelvin: dict[str, float] = field(default_factory=dict)  # unrounded estimates

    def _entry(self, sample_name: str) -> dict[str, Any]:
        if sample_name not in self.samples:
            self.samples[sample_name] = {'bounds': None, 'source': 'photo', 'techniques': {}}
        return self.samples[sample_name]

    def add(self, sample_name: str, technique_name: str, data: dict[str, Any]) -> None:
        """Add technique results for a sample."""
        self._entry(sample_name)['techniques'][technique_name] = data

    def set_bounds(self, sample_name: str, bounds: tuple[int, int, int, int], source: str = 'photo') -> None:
        """Set the bounds and source of a sample in the report."""
        entry = self._entry(sample_name)
        entry['bounds'] = list(bounds)
        entry['source'] = source

    def record_kelvin(self, sample_name: str, kelvin: float) -> None:
        """Keep the full-precision estimate; the technique data holds the rounded one."""
        self.kelvin[sample_name] = kelvin

    def kelvin_values(self) -> dict[str, float]:
        """Return every successfully estimated temperature keyed by sample name."""
        return dict(self.kelvin)

    def temperature_errors(self) -> dict[str, str]:
        """Return the samples whose temperature could not be estimated."""
        result = {}
        for name, entry in self.samples.items():
            error = entry['techniques'].get('temperature', {}).get('error')
            if error is not None:
                result[name] = error
        return result

    def record_pass(self, sample_name: str) -> None:
        self.pass_count += 1

    def record_fail(self, sample_name: str) -> None:
        self.fail_count += 1
