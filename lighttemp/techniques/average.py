"""Average colour per sample.

Averages every pixel of each sample (or LIGHTTEMP_MAX_SAMPLES of them,
chosen with a fixed seed) and reports it as hex and RGB. This is the
colour the temperature technique feeds into the estimator.

Example:
    lighttemp average photo.jpg
    lighttemp average photo.jpg --region sky=0,0,4032,1200
"""

from lighttemp.core.average import average_colour
from lighttemp.core.errors import EmptyImage
from lighttemp.core.types import Report, Sample, Technique

technique = Technique(
    name='average',
    help='Average colour per sample, as hex and RGB.',
)


@technique.run
def run(samples: list[Sample], report: Report, settings) -> None:
    for sample in samples:
        try:
            colour = average_colour(sample.image, max_samples=settings.max_samples)
        except EmptyImage as e:
            report.add(sample.name, 'average', {'error': str(e)})
            continue
        report.add(sample.name, 'average', {'hex': colour.hex, 'rgb': list(colour.as_tuple())})
