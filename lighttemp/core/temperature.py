"""Correlated colour temperature from an average RGB colour.

Pipeline (single pass, no iteration):

  1. RGB channels, as floats in [0, 255], through a fixed linear transform
     into tristimulus values X, Y, Z.
  2. Chromaticity x = X / (X+Y+Z), y = Y / (X+Y+Z).
  3. McCamy's approximation:
       n   = (x - 0.3320) / (0.1858 - y)
       CCT = 449 n^3 + 3525 n^2 + 6823.3 n + 5520.33

The transform coefficients operate on 0..255 channel values, not on
normalised 0..1 values. Since x and y are ratios the scale cancels out, so
every neutral grey lands on the same temperature.

Exactly-zero denominators raise DegenerateChromaticity or
DegenerateMcCamyDenominator. Every other input gets the formula's value
unchanged, including unphysical ones far outside the Planckian locus.
"""

from lighttemp.core.errors import DegenerateChromaticity, DegenerateMcCamyDenominator
from lighttemp.core.types import ChromaticityPoint, RGBColor, Tristimulus

# Rows map (R, G, B) to X, Y and Z respectively
RGB_TO_XYZ = (
    (-0.14282, 1.54924, -0.95641),
    (-0.32466, 1.57837, -0.73191),
    (-0.68202, 0.77073, 0.56332),
)

MCCAMY_XE = 0.3320
MCCAMY_YE = 0.1858
MCCAMY_COEFFS = (449.0, 3525.0, 6823.3, 5520.33)  # n^3, n^2, n, 1

WARM_BELOW = 4000.0
COOL_ABOVE = 6500.0


def tristimulus(color: RGBColor) -> Tristimulus:
    r, g, b = float(color.r), float(color.g), float(color.b)
    rows = [cr * r + cg * g + cb * b for cr, cg, cb in RGB_TO_XYZ]
    return Tristimulus(X=rows[0], Y=rows[1], Z=rows[2])


def chromaticity(color: RGBColor) -> ChromaticityPoint:
    """Project a colour onto the xy chromaticity plane."""
    xyz = tristimulus(color)
    total = xyz.X + xyz.Y + xyz.Z
    if total == 0:
        raise DegenerateChromaticity(f'X+Y+Z is zero for {color.hex}; chromaticity is undefined')
    return ChromaticityPoint(x=xyz.X / total, y=xyz.Y / total)


def mccamy_n(point: ChromaticityPoint) -> float:
    """McCamy's auxiliary variable n for a chromaticity point."""
    denominator = MCCAMY_YE - point.y
    if denominator == 0:
        raise DegenerateMcCamyDenominator(f'y={point.y} equals the McCamy epicentre; n is undefined')
    return (point.x - MCCAMY_XE) / denominator


def mccamy(point: ChromaticityPoint) -> float:
    """McCamy's cubic CCT approximation for a chromaticity point."""
    n = mccamy_n(point)
    a3, a2, a1, a0 = MCCAMY_COEFFS
    return a3 * n**3 + a2 * n**2 + a1 * n + a0


def estimate(color: RGBColor) -> float:
    """Estimate the correlated colour temperature of `color`, in Kelvin."""
    return mccamy(chromaticity(color))


def describe(kelvin: float) -> str:
    """Coarse label for a temperature: warm, neutral or cool."""
    if kelvin < WARM_BELOW:
        return 'warm'
    if kelvin > COOL_ABOVE:
        return 'cool'
    return 'neutral'


def analyse(color: RGBColor, precision: int = 1) -> dict:
    """Every intermediate of the estimate, rounded for reports.

    Raises the same Degenerate* errors as estimate().
    """
    xyz = tristimulus(color)
    point = chromaticity(color)
    n = mccamy_n(point)
    kelvin = mccamy(point)
    return {
        'hex': color.hex,
        'rgb': list(color.as_tuple()),
        'xyz': [round(xyz.X, 4), round(xyz.Y, 4), round(xyz.Z, 4)],
        'xy': [round(point.x, 4), round(point.y, 4)],
        'n': round(n, 4),
        'kelvin': round(kelvin, precision),
        'label': describe(kelvin),
    }
