"""As-shot white balance multipliers of the RAW companion.

Reports the per-channel multipliers the camera chose when the picture
was taken, read from the RAW file's metadata. Only RAW samples carry
them; processed photo samples are skipped.

The multipliers are reported as stored, not converted to Kelvin. The
camera's own as-shot neutral temperature (the value a DNG developer such
as Core Image derives from the white balance and colour matrices) is not
reproduced. For a temperature of the RAW, run `temperature` with --raw:
it applies the McCamy estimate to the developed RAW's average colour.

Requires --raw.

Example:
    lighttemp whitebalance photo.jpg --raw photo.dng
"""

from lighttemp.core.types import Report, Sample, Technique

technique = Technique(
    name='whitebalance',
    help='As-shot white balance multipliers from the RAW companion (requires --raw).',
)


@technique.run
def run(samples: list[Sample], report: Report, settings) -> None:
    for sample in samples:
        if sample.source != 'raw':
            continue
        if not sample.white_balance or not any(sample.white_balance):
            report.add(sample.name, 'whitebalance', {'error': 'RAW file has no as-shot white balance'})
            continue
        multipliers = list(sample.white_balance)
        green = multipliers[1] if len(multipliers) > 1 and multipliers[1] else 1.0
        report.add(
            sample.name,
            'whitebalance',
            {
                'multipliers': multipliers,
                'normalised': [round(m / green, 4) for m in multipliers],
            },
        )
