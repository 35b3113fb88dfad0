"""
Tech change cap: scales MAC reductions so that finalReduction is reached by the final reduction
period, independent of the maximum reduction of the curve itself.
"""

import logging

from ghgmac.util.enumerations import TechChangeSingularity

logger = logging.getLogger(__name__)


def cap_multiplier(
    period,
    final_reduction_period,
    max_reduction,
    final_reduction,
    singularity=TechChangeSingularity.LIMIT,
):
    """
    Linear ramp from period 2 up to max_reduction / final_reduction at final_reduction_period,
    flat afterwards. A final_reduction_period of 2 leaves the ramp without width and is
    resolved by the singularity policy.
    """
    change = max_reduction / final_reduction

    if final_reduction_period == 2:
        if singularity == TechChangeSingularity.SKIP:
            logger.warning(
                "Final reduction period is 2, tech change cap is not applied."
            )
            return 1.0
        # LIMIT: step to the full cap at period 2
        return change if period >= final_reduction_period else 0.0

    if period <= final_reduction_period:
        multiplier = change * (1 / (final_reduction_period - 2)) * (period - 2)
    else:
        multiplier = change
    return multiplier


class TechChangeAdjuster:
    """
    Holds the final reduction target and the policy for the degenerate ramp.
    """

    def __init__(self, final_reduction, singularity=TechChangeSingularity.LIMIT):
        self.final_reduction = final_reduction
        self.singularity = singularity

    def applies(self, max_reduction, final_reduction_period):
        """
        The cap is only used when a target is set and lies above the curve's own maximum.
        A final_reduction of 0 switches the cap off, also for curves with negative values.
        """
        return (
            self.final_reduction != 0
            and self.final_reduction > max_reduction
            and final_reduction_period > 1
        )

    def cap_multiplier(self, period, final_reduction_period, max_reduction):
        return cap_multiplier(
            period,
            final_reduction_period,
            max_reduction,
            self.final_reduction,
            singularity=self.singularity,
        )
