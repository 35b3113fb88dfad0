"""
Bundles the calendar and the market prices a MAC curve or technology reads during a run.
"""

from ghgmac.util.model_time import TimeHorizon
from ghgmac.util.marketplace import Marketplace


class ModelContext:
    """
    Passed explicitly to every object that needs the calendar or market prices.
    """

    def __init__(self, time_horizon, marketplace=None):
        self.time_horizon = time_horizon
        if marketplace is None:
            marketplace = Marketplace(time_horizon)
        self.marketplace = marketplace

    @classmethod
    def from_years(cls, start_year, end_year, timestep, base_period=0):
        return cls(
            TimeHorizon(
                start_year=start_year,
                end_year=end_year,
                timestep=timestep,
                base_period=base_period,
            )
        )
