"""
This file contains the Time class for the GHG MAC model which determines the periods of the model
and the conversion between periods and calendar years.
"""

import numpy as np


class TimeHorizon:
    """
    This class controls the time horizon and the periods of the model.
    Period 0 is start_year, every following period is timestep years later.
    """

    def __init__(
        self,
        start_year,
        end_year,
        timestep,  # years per model period
        base_period=0,  # period the curves are calibrated in
    ):
        if timestep <= 0:
            raise ValueError("Timestep should be a positive number of years.")
        if end_year < start_year:
            raise ValueError("End year should not be before the start year.")

        self.start_year = start_year
        self.end_year = end_year
        self.timestep = timestep
        self.base_period = base_period

        # Calendar year of every model period
        self.model_time_horizon = np.arange(
            self.start_year, (self.end_year + self.timestep), self.timestep
        )

    def __len__(self):
        return len(self.model_time_horizon)

    @property
    def base_year(self):
        return self.period_to_year(self.base_period)

    def period_to_year(self, period):
        """
        This method returns the calendar year of a model period.
        """
        return int(self.start_year + period * self.timestep)

    def year_to_period(self, year):
        """
        This method returns the first period whose year is at or after the given year.
        Years outside the horizon map to the first or the last period.
        """
        period = np.searchsorted(self.model_time_horizon, year, side="left")
        return int(min(period, len(self.model_time_horizon) - 1))

    def periods(self):
        """
        This method returns all period indices of the horizon.
        """
        return range(len(self.model_time_horizon))
