"""Correlated colour temperature per sample (McCamy's approximation).

For each sample: average colour → tristimulus XYZ → chromaticity xy →
McCamy n → Kelvin, plus a warm / neutral / cool label
(warm below 4000 K, cool above 6500 K).

A sample whose colour has no defined chromaticity (pure black) or sits
exactly on McCamy's epicentre is reported with an error and counted as a
failure. The remaining samples are still estimated.

Use --fail-outside MIN,MAX to exit 1 when any estimate leaves the range
or any sample cannot be estimated. The gate compares the unrounded
estimates, not the LIGHTTEMP_PRECISION-rounded values shown.

Example:
    lighttemp temperature photo.jpg
    lighttemp temperature photo.jpg --raw photo.dng --json
    lighttemp temperature photo.jpg --fail-outside 5000,7000
"""

import sys

from lighttemp.core.average import average_colour
from lighttemp.core.errors import DegenerateColourError, EmptyImage
from lighttemp.core.temperature import analyse, estimate
from lighttemp.core.types import Report, Sample, Technique

technique = Technique(
    name='temperature',
    help='Estimate correlated colour temperature (Kelvin) per sample.',
)


@technique.run
def run(samples: list[Sample], report: Report, settings) -> None:
    for sample in samples:
        try:
            colour = average_colour(sample.image, max_samples=settings.max_samples)
            kelvin = estimate(colour)
            data = analyse(colour, precision=settings.precision)
        except (DegenerateColourError, EmptyImage) as e:
            print(f'lighttemp: {sample.name}: {e}', file=sys.stderr)
            report.add(sample.name, 'temperature', {'error': str(e)})
            report.record_fail(sample.name)
            continue
        report.add(sample.name, 'temperature', data)
        report.record_kelvin(sample.name, kelvin)
        report.record_pass(sample.name)
