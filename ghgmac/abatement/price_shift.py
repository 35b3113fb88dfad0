"""
Shift of the effective carbon price driven by a reference fuel price, usually natural gas.

The shift range (fuel_shift_range) is fitted per MAC table. It is the initial range of the shift
between a 50% drop and a 200% rise of the fuel price relative to the reference period, taken from
EPA-EMF results. The range narrows as the carbon price approaches the top of the curve.
"""

import logging

from ghgmac.default_parameters import PriceShiftDefaults
from ghgmac.util.marketplace import NO_MARKET_PRICE

logger = logging.getLogger(__name__)


class PriceShiftAdjuster:
    """
    This class shifts a carbon price up or down with the change of a reference fuel price.
    """

    def __init__(self, fuel_name, fuel_shift_range, marketplace, **kwargs):
        price_shift_defaults = PriceShiftDefaults().get_defaults("NATURAL_GAS")

        self.fuel_name = fuel_name
        self.fuel_shift_range = fuel_shift_range
        self.marketplace = marketplace

        self.norm_factor = kwargs.get("norm_factor", price_shift_defaults["norm_factor"])
        self.reference_period = kwargs.get(
            "reference_period", price_shift_defaults["reference_period"]
        )

    def _fuel_price(self, region_name, period):
        price = self.marketplace.get_price(self.fuel_name, region_name, period)
        if price == NO_MARKET_PRICE:
            return 0.0
        return price

    def price_change_ratio(self, region_name, period):
        """
        Ratio of the reference period fuel price to the current fuel price, 1 if there is no current price.
        """
        fuel_price = self._fuel_price(region_name, period)
        fuel_base_price = self._fuel_price(region_name, self.reference_period)

        if fuel_price == 0:
            return 1.0
        return fuel_base_price / fuel_price

    def shift(self, period, region_name, carbon_price, min_x, max_x):
        """
        Returns the shifted carbon price, kept within [min_x, max_x] of the MAC curve.
        """
        price_change_ratio = self.price_change_ratio(region_name, period)

        if max_x != min_x:
            convergence_factor = 0.5 + 0.5 * ((max_x - carbon_price) / (max_x - min_x))
        else:
            # Single point curve, the clamp below decides the price
            convergence_factor = 1.0

        new_carbon_price = carbon_price + (
            self.norm_factor
            * (1 - price_change_ratio)
            * self.fuel_shift_range
            * convergence_factor
        )

        new_carbon_price = max(new_carbon_price, min_x)
        new_carbon_price = min(new_carbon_price, max_x)

        logger.debug(
            "Shifted carbon price %s to %s in %s period %s (fuel price ratio %s).",
            carbon_price,
            new_carbon_price,
            region_name,
            period,
            price_change_ratio,
        )
        return new_carbon_price
