"""APY approximation from a per-period yield.

This is the one deliberately floating computation in token-math: compounding
is done with native floats over an exact 6-place rendering of ``1 + yield``,
and the result is brought back into an exact Percent over ``10**10``.
"""

import math

from token_math.config import ApySettings, get_settings
from token_math.logging import get_logger
from token_math.percent import Percent

logger = get_logger(__name__)


def compute_apy(
    period_yield: Percent,
    periods: int = 365,
    *,
    settings: ApySettings | None = None,
) -> Percent | None:
    """Compute APY from a yield compounded ``periods`` times per year.

    APY = (1 + period_yield) ** periods - 1

    Args:
        period_yield: Yield per period as a ratio (Percent(1, 100) is 1%).
        periods: Compounding periods per year. Default 365 (daily).
        settings: Scale overrides. Defaults to the global ApySettings.

    Returns:
        APY as a Percent over 10**10 (floored), or None if the float
        computation overflows.
    """
    settings = settings or get_settings().apy
    base = float(period_yield.add(1).as_fraction.to_fixed(settings.base_decimal_places))
    scale = 10**settings.precision_decimal_places
    try:
        scaled = (base**periods - 1) * scale
    except OverflowError:
        scaled = math.inf
    if not math.isfinite(scaled):
        logger.warning("apy_not_finite", base=base, periods=periods)
        return None
    return Percent(math.floor(scaled), scale)
