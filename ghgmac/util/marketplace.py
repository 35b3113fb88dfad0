"""
In-memory market price store used by the MAC curves and the building technologies.
"""

import logging

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

# Returned when a market does not exist or has no price in a period
NO_MARKET_PRICE = np.finfo(np.float64).max


class Marketplace:
    """
    Holds one price series per (market, region) pair over the model periods.
    """

    def __init__(self, time_horizon):
        self.time_horizon = time_horizon
        self.n_periods = len(time_horizon)
        self.prices = {}

    def _series(self, market_name, region_name):
        key = (market_name, region_name)
        if key not in self.prices:
            self.prices[key] = np.full(self.n_periods, np.nan)
        return self.prices[key]

    def set_price(self, market_name, region_name, period, price):
        self._series(market_name, region_name)[period] = price

    def set_prices(self, market_name, region_name, prices):
        """
        Sets the whole price path of a market. Shorter paths leave the later periods unset.
        """
        prices = np.asarray(prices, dtype=float)
        if prices.shape[0] > self.n_periods:
            raise ValueError(
                "Price path has "
                + str(prices.shape[0])
                + " periods but the horizon only has "
                + str(self.n_periods)
            )
        self._series(market_name, region_name)[: prices.shape[0]] = prices

    def has_market(self, market_name, region_name):
        return (market_name, region_name) in self.prices

    def get_price(self, market_name, region_name, period, must_exist=True):
        """
        Returns the price of a market in a period, or NO_MARKET_PRICE when there is none.
        A missing price is logged as an error when must_exist is set.
        """
        series = self.prices.get((market_name, region_name))
        if series is None or not 0 <= period < self.n_periods or np.isnan(series[period]):
            if must_exist:
                logger.error(
                    "Market %s in region %s has no price in period %s.",
                    market_name,
                    region_name,
                    period,
                )
            return NO_MARKET_PRICE
        return float(series[period])

    def to_frame(self):
        """
        Returns all prices as a DataFrame indexed by (market, region) with one column per year.
        """
        frame = pd.DataFrame.from_dict(self.prices, orient="index")
        frame.columns = self.time_horizon.model_time_horizon[: frame.shape[1]]
        frame.index = pd.MultiIndex.from_tuples(frame.index, names=["market", "region"])
        return frame
