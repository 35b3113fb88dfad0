"""
Multipliers applied around the MAC curve lookup that only depend on the period.
"""

import logging

logger = logging.getLogger(__name__)


def phase_in_multiplier(period, phase_in):
    """
    Multiplier that phases in a MAC curve.
    For a curve phased in over 3 periods this is 0 in period 1, 1/3 in period 2, 2/3 in period 3
    and 1 from period 4 on. A phase_in below 1 gives the full effect immediately.
    """
    multiplier = 1.0
    if (period - 1) < phase_in and phase_in >= 1:
        multiplier = (period - 1) / phase_in
    return multiplier


def cost_reduction_factor(period, cost_reduction_rate, base_cost_year, time_horizon):
    """
    Multiplier on the carbon price that makes reductions cheaper over time without changing the
    maximum reduction. Only periods after base_cost_year are adjusted.
    """
    if cost_reduction_rate != 0:
        number_of_years = time_horizon.period_to_year(period) - base_cost_year
        if number_of_years > 0:
            if cost_reduction_rate <= -1:
                logger.error(
                    "Cost reduction rate %s must be above -1, cost reduction is not applied.",
                    cost_reduction_rate,
                )
                return 1.0
            return 1 / (1 + cost_reduction_rate) ** number_of_years
    return 1.0
