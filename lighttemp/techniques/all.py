"""Run every technique, combine into a single report.

Runs: average, temperature, whitebalance.
whitebalance only contributes when --raw is given.

Example:
    lighttemp all photo.jpg
    lighttemp all photo.jpg --raw photo.dng --json
"""

from lighttemp.core.types import Report, Sample, Technique

technique = Technique(
    name='all',
    help='Run every technique. Combine into a single report.',
)

SKIP = {'all'}


@technique.run
def run(samples: list[Sample], report: Report, settings) -> None:
    from lighttemp.registry import all_techniques

    for name, tech in sorted(all_techniques().items()):
        if name in SKIP:
            continue
        tech.execute(samples, report, settings)
