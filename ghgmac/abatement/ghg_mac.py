"""
Marginal Abatement Cost (MAC) curve of a greenhouse gas.

The curve is read in as a series of (carbon price, reduction) points, where the reduction is the
fraction of emissions removed (0 = none, 1 = completely reduced). It is piecewise linear, so the
reduction for any carbon price between two points is found by linear interpolation.

The reduction in a period is found with the following chain, always in this order:
    fuel price shift -> cost reduction over time -> curve lookup -> noBelowZero -> phase in -> tech change cap
"""

import copy
import logging

from ghgmac.abatement.adjustments import cost_reduction_factor, phase_in_multiplier
from ghgmac.abatement.price_shift import PriceShiftAdjuster
from ghgmac.abatement.tech_change import TechChangeAdjuster
from ghgmac.default_parameters import MacDefaults
from ghgmac.util.curve import CURVE_ERROR, PointSetCurve
from ghgmac.util.enumerations import TechChangeSingularity, ValueType
from ghgmac.util.marketplace import NO_MARKET_PRICE
from ghgmac.util.parameter_registry import Parameter, ParameterRegistry

logger = logging.getLogger(__name__)

mac_defaults = MacDefaults().get_defaults("GHG_MAC")

GHG_MAC_PARAMETERS = ParameterRegistry(
    "MAC",
    [
        Parameter("phaseIn", "phase_in", ValueType.FLOAT, mac_defaults["phaseIn"]),
        Parameter(
            "costReductionRate",
            "cost_reduction_rate",
            ValueType.FLOAT,
            mac_defaults["costReductionRate"],
            validator=lambda rate: rate > -1,
        ),
        Parameter(
            "baseCostYear",
            "base_cost_year",
            ValueType.INT,
            lambda context: context.time_horizon.base_year,
        ),
        Parameter(
            "fuelShiftRange",
            "fuel_shift_range",
            ValueType.FLOAT,
            mac_defaults["fuelShiftRange"],
        ),
        Parameter(
            "curveShiftFuelName",
            "curve_shift_fuel_name",
            ValueType.STRING,
            mac_defaults["curveShiftFuelName"],
        ),
        Parameter(
            "finalReduction",
            "final_reduction",
            ValueType.FLOAT,
            mac_defaults["finalReduction"],
        ),
        Parameter(
            "finalReductionYear",
            "final_reduction_year",
            ValueType.INT,
            lambda context: context.time_horizon.end_year,
        ),
        Parameter(
            "noBelowZero", "no_below_zero", ValueType.BOOL, mac_defaults["noBelowZero"]
        ),
        Parameter(
            "carbonMarketName",
            "carbon_market_name",
            ValueType.STRING,
            mac_defaults["carbonMarketName"],
        ),
        Parameter(
            "techChangeSingularity",
            "tech_change_singularity",
            ValueType.STRING,
            mac_defaults["techChangeSingularity"],
            converter=TechChangeSingularity.from_name,
        ),
        Parameter("reduction", "reduction_points", ValueType.POINTS, lambda context: []),
    ],
)


class GhgMac:
    """
    This class computes the emissions reduction of one gas from its MAC curve.
    """

    def __init__(self, context, reduction_points=(), name="", config=None, **kwargs):
        """
        @param context: ModelContext supplying the calendar and the market prices
        @param reduction_points: (carbon price, reduction) calibration points
        @param name: Name of the gas, used in log messages
        @param config: Mapping of MAC parameters by configuration key, read before kwargs
        @param kwargs: MAC parameters, by configuration key (phaseIn) or attribute name (phase_in)
        """
        self.context = context
        self.name = name

        GHG_MAC_PARAMETERS.apply_defaults(self, context)
        if config is not None:
            GHG_MAC_PARAMETERS.parse(config, self)
        GHG_MAC_PARAMETERS.parse(kwargs, self)
        if len(reduction_points) > 0:
            GHG_MAC_PARAMETERS.parse({"reduction": reduction_points}, self)

        # The curve cannot be changed once it is built
        self.mac_curve = PointSetCurve(self.reduction_points)
        self.reduction_points = self.mac_curve.get_sorted_pairs()

        self._build_adjusters()

    @classmethod
    def from_config(cls, config, context, name=""):
        """
        Builds a MAC from a configuration mapping such as
        {"phaseIn": 2, "reduction": [{"tax": 0, "reduction": 0}, ...]}.
        """
        return cls(context, name=name, config=config)

    def _build_adjusters(self):
        self.price_shift = None
        if self.fuel_shift_range != 0:
            if not self.curve_shift_fuel_name:
                logger.warning(
                    "MAC for gas %s has a fuelShiftRange but no curveShiftFuelName.",
                    self.name,
                )
            self.price_shift = PriceShiftAdjuster(
                self.curve_shift_fuel_name,
                self.fuel_shift_range,
                self.context.marketplace,
            )
        self.tech_change = TechChangeAdjuster(
            self.final_reduction, singularity=self.tech_change_singularity
        )

    def clone(self):
        """
        Returns a copy that owns its own curve. The model context stays shared.
        """
        other = copy.copy(self)
        other.mac_curve = self.mac_curve.clone()
        other.reduction_points = list(self.reduction_points)
        other._build_adjusters()
        return other

    def init_calc(self, ghg_name=None):
        """
        Checks that the curve has data. An empty curve is logged and gives zero reductions.
        """
        if ghg_name is None:
            ghg_name = self.name
        if self.mac_curve.get_max_x() == CURVE_ERROR:
            logger.error("MAC for gas %s appears to have no data.", ghg_name)
            return False
        return True

    def get_sorted_pairs(self):
        return self.mac_curve.get_sorted_pairs()

    def get_carbon_price(self, region_name, period):
        """
        Returns the carbon price of the region, 0 if the market has no price.
        """
        carbon_price = self.context.marketplace.get_price(
            self.carbon_market_name, region_name, period, must_exist=False
        )
        if carbon_price == NO_MARKET_PRICE:
            carbon_price = 0.0
        return carbon_price

    def get_effective_carbon_price(self, region_name, period):
        """
        Returns the carbon price after the fuel price shift and the cost reduction.
        """
        effective_carbon_price = self.get_carbon_price(region_name, period)

        # Avoid this calculation if there is no shift to perform
        if self.price_shift is not None:
            effective_carbon_price = self.price_shift.shift(
                period,
                region_name,
                effective_carbon_price,
                self.mac_curve.get_min_x(),
                self.mac_curve.get_max_x(),
            )

        effective_carbon_price *= self.shift_cost_reduction(period)
        return effective_carbon_price

    def find_reduction(self, region_name, period):
        """
        Returns the fraction of emissions reduced in the region and period.
        The result is not limited to [0, 1]: tech change caps above 1 or extrapolation below the
        first point are passed on to the caller as they are.
        """
        effective_carbon_price = self.get_effective_carbon_price(region_name, period)

        reduction = self.get_mac_value(effective_carbon_price)

        if self.no_below_zero and effective_carbon_price < 0:
            reduction = 0.0

        reduction *= self.adjust_phase_in(period)

        max_reduction = self.get_max_reduction()
        final_reduction_period = self.get_final_reduction_period()

        if self.tech_change.applies(max_reduction, final_reduction_period):
            reduction *= self.tech_change.cap_multiplier(
                period, final_reduction_period, max_reduction
            )
        return reduction

    def get_mac_value(self, carbon_price):
        """
        Returns the curve value at a carbon price, never interpolating beyond the last point.
        Errors are logged and give a reduction of 0.
        """
        max_carbon_price = self.mac_curve.get_max_x()

        effective_carbon_price = min(carbon_price, max_carbon_price)

        reduction = self.mac_curve.get_y(effective_carbon_price)

        if reduction == CURVE_ERROR:
            logger.error(
                "An error occurred when evaluating the MAC curve for gas %s.", self.name
            )
            reduction = 0.0
        return reduction

    def get_max_reduction(self):
        return self.get_mac_value(self.mac_curve.get_max_x())

    def get_final_reduction_period(self):
        return self.context.time_horizon.year_to_period(self.final_reduction_year)

    def adjust_phase_in(self, period):
        return phase_in_multiplier(period, self.phase_in)

    def shift_cost_reduction(self, period):
        return cost_reduction_factor(
            period,
            self.cost_reduction_rate,
            self.base_cost_year,
            self.context.time_horizon,
        )

    def to_config(self, skip_defaults=True):
        """
        Returns the parameters as a configuration mapping, leaving out defaults.
        from_config on the result rebuilds an equivalent MAC.
        """
        return GHG_MAC_PARAMETERS.to_config(
            self, self.context, skip_defaults=skip_defaults
        )

    def to_debug_frame(self, period):
        """
        Returns the calibration points with the period multipliers applied to them.
        """
        frame = self.mac_curve.to_frame(x_name="tax", y_name="reduction")
        frame["phase_in"] = self.adjust_phase_in(period)

        tech_change = 1.0
        max_reduction = self.get_max_reduction()
        final_reduction_period = self.get_final_reduction_period()
        if self.tech_change.applies(max_reduction, final_reduction_period):
            tech_change = self.tech_change.cap_multiplier(
                period, final_reduction_period, max_reduction
            )
        frame["tech_change"] = tech_change
        frame["cost_reduction"] = self.shift_cost_reduction(period)
        frame["adjusted_reduction"] = (
            frame["reduction"] * frame["phase_in"] * frame["tech_change"]
        )
        frame.attrs["gas"] = self.name
        frame.attrs["period"] = period
        return frame
