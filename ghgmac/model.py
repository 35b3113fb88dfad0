"""
This is the MAC model that evaluates the emissions reductions of several gases over all regions
and periods of a run.
"""

import logging

import numpy as np
import pandas as pd

from ghgmac.abatement.ghg_mac import GhgMac

logger = logging.getLogger(__name__)


class MacModel:
    """
    This is the MAC model.
    """

    def __init__(self, context, region_list, macs):
        """
        @param context: ModelContext with the calendar and the market prices of the run
        @param region_list: Names of the regions
        @param macs: Mapping of gas name to GhgMac
        """
        self.context = context
        self.time_horizon = context.time_horizon
        self.region_list = list(region_list)
        self.macs = dict(macs)

        # Reductions per gas, shape (regions, periods)
        self.reductions = {
            gas: np.zeros((len(self.region_list), len(self.time_horizon)))
            for gas in self.macs
        }

    @classmethod
    def from_config(cls, config, context, region_list):
        """
        Builds the model from {"MAC": {gas name: MAC configuration}}.
        """
        macs = {}
        for gas, mac_config in config.get("MAC", {}).items():
            macs[gas] = GhgMac.from_config(mac_config, context, name=gas)
        for key in config:
            if key != "MAC":
                logger.warning(
                    "Unrecognized text string: %s found while parsing the MAC model.",
                    key,
                )
        return cls(context, region_list, macs)

    def clone(self):
        """
        Returns a copy for a scenario variant. Every MAC owns its own curve in the copy.
        """
        return MacModel(
            self.context,
            self.region_list,
            {gas: mac.clone() for gas, mac in self.macs.items()},
        )

    def init_calc(self):
        """
        Checks every MAC before a run. Returns the names of gases without curve data.
        """
        return [gas for gas, mac in self.macs.items() if not mac.init_calc(gas)]

    def stepwise_run(self, period):
        """
        Finds the reductions of all gases and regions in one period.
        """
        for gas, mac in self.macs.items():
            for region_index, region_name in enumerate(self.region_list):
                self.reductions[gas][region_index, period] = mac.find_reduction(
                    region_name, period
                )

    def run(self):
        """
        Runs all periods after the base period. Reductions of the base period and earlier stay 0,
        since the phase-in multiplier is negative before period 1 and would flip their sign.
        """
        self.init_calc()
        for period in self.time_horizon.periods():
            if period <= self.time_horizon.base_period:
                continue
            self.stepwise_run(period)

    def evaluate(self):
        """
        Returns the reductions of the run per gas, shape (regions, periods).
        """
        return {gas: reduction.copy() for gas, reduction in self.reductions.items()}

    def to_frame(self):
        """
        Returns the reductions as a long DataFrame with columns gas, region, year and reduction.
        """
        years = self.time_horizon.model_time_horizon
        frames = []
        for gas, reduction in self.reductions.items():
            frame = pd.DataFrame(reduction, index=self.region_list, columns=years)
            frame = frame.rename_axis(index="region", columns="year")
            frame = frame.stack().rename("reduction").reset_index()
            frame.insert(0, "gas", gas)
            frames.append(frame)

        if not frames:
            return pd.DataFrame(columns=["gas", "region", "year", "reduction"])
        return pd.concat(frames, ignore_index=True)
