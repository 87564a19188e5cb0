"""Score formatting shared by results and summaries.

Scores print with a fixed number of decimals. Values too small to show at
that precision print as an order of magnitude (``≈ 10⁻⁴``) instead of
collapsing to ``0.000``.
"""

import math

# Digits after the decimal point for rendered scores
SCORE_PRECISION = 3

_SUPERSCRIPTS = str.maketrans("-0123456789", "⁻⁰¹²³⁴⁵⁶⁷⁸⁹")


def is_approximate(score: float, precision: int = SCORE_PRECISION) -> bool:
    """Check whether a score is nonzero but rounds to zero at precision."""
    return score != 0 and math.isfinite(score) and abs(score) < 10**-precision


def format_score(score: float, precision: int = SCORE_PRECISION) -> str:
    """Format a score for display.

    Args:
        score: Value to format.
        precision: Digits after the decimal point.

    Returns:
        Formatted score, e.g. ``1234.568``, ``≈ 10⁻⁵`` or ``NaN``.
    """
    if math.isnan(score):
        return "NaN"
    if is_approximate(score, precision):
        power = round(math.log10(abs(score)))
        sign = "-" if score < 0 else ""
        return f"≈ {sign}10{str(power).translate(_SUPERSCRIPTS)}"
    return f"{score:.{precision}f}"


def format_percent(fraction: float) -> str:
    """Format a confidence level such as 0.999 as '99.9%'."""
    return f"{fraction * 100:.1f}%"
