"""
Building service demand "technologies". Their output is a demand for a building service
(heating, cooling, other appliances) per unit floor space, and calibration adjusts their share
weight so that output matches the calibrated demand.

Heating and cooling demands are corrected for internal gains: heat given off by other equipment
in the building lowers heating demand and raises cooling demand.
"""

import logging

from ghgmac.default_parameters import BuildingDefaults
from ghgmac.util.enumerations import InternalGains, ValueType
from ghgmac.util.marketplace import NO_MARKET_PRICE
from ghgmac.util.parameter_registry import Parameter, ParameterRegistry

logger = logging.getLogger(__name__)

building_defaults = BuildingDefaults()
generic_defaults = building_defaults.get_defaults("GENERIC")
heat_cool_defaults = building_defaults.get_defaults("HEAT_COOL")

GENERIC_DMD_PARAMETERS = ParameterRegistry(
    "buildingGenericDmdTechnology",
    [
        Parameter(
            "saturation", "saturation", ValueType.FLOAT, generic_defaults["saturation"]
        ),
        Parameter(
            "shareWeight",
            "share_weight",
            ValueType.FLOAT,
            generic_defaults["shareWeight"],
        ),
    ],
)

HEAT_COOL_DMD_PARAMETERS = GENERIC_DMD_PARAMETERS.extend(
    "buildingHeatCoolDmdTechnology",
    [
        Parameter(
            "fractionOfYearActive",
            "fraction_of_year_active",
            ValueType.FLOAT,
            heat_cool_defaults["fractionOfYearActive"],
        ),
        Parameter(
            "intGainsMarketName",
            "int_gains_market_name",
            ValueType.STRING,
            heat_cool_defaults["intGainsMarketName"],
        ),
    ],
)


def get_info_double(info, key, must_exist=True):
    """
    Reads a number from a subsector info mapping. Missing values are 0 and logged when must_exist.
    """
    if key not in info:
        if must_exist:
            logger.error("Could not find %s in the subsector info.", key)
        return 0.0
    return float(info[key])


class BuildingGenericDmdTechnology:
    """
    Building service demand with a demand function prefix equal to its saturation.
    """

    parameters = GENERIC_DMD_PARAMETERS

    def __init__(self, name, year, context, config=None, **kwargs):
        self.name = name
        self.year = year
        self.context = context

        self.parameters.apply_defaults(self, context)
        if config is not None:
            self.parameters.parse(config, self)
        self.parameters.parse(kwargs, self)

    @classmethod
    def from_config(cls, name, year, config, context):
        return cls(name, year, context, config=config)

    def to_config(self, skip_defaults=True):
        return self.parameters.to_config(self, self.context, skip_defaults=skip_defaults)

    def init_calc(self, region_name, sector_name, subsector_info, period):
        pass

    def get_demand_fn_prefix(self, region_name, period):
        return self.saturation

    def adjust_for_calibration(
        self, subsector_demand, region_name, subsector_info, period
    ):
        """
        Sets the share weight so that unit demand times the prefix gives the calibrated demand.
        """
        self.share_weight = self._share_weight_from_demand(
            subsector_demand, region_name, period
        )
        return self.share_weight

    def _share_weight_from_demand(self, unit_demand, region_name, period):
        demand_fn_prefix = self.get_demand_fn_prefix(region_name, period)
        if demand_fn_prefix == 0:
            logger.error(
                "Demand function prefix of %s in %s period %s is zero, share weight set to 0.",
                self.name,
                region_name,
                period,
            )
            return 0.0
        return unit_demand / demand_fn_prefix


class BuildingHeatCoolDmdTechnology(BuildingGenericDmdTechnology):
    """
    Heating or cooling demand. The demand function prefix scales with insulation, building shape
    and degree days, and calibration removes the internal gains from the demand.
    """

    parameters = HEAT_COOL_DMD_PARAMETERS
    internal_gains = InternalGains.HEATING

    def __init__(self, name, year, context, config=None, **kwargs):
        super().__init__(name, year, context, config=config, **kwargs)
        self.ave_insulation = 0.0
        self.floor_to_surface_area = 0.0
        self.degree_days = 0.0

    def init_calc(self, region_name, sector_name, subsector_info, period):
        """
        Reads the building shell values of the subsector. Done once per period.
        """
        self.ave_insulation = get_info_double(subsector_info, "aveInsulation")
        self.floor_to_surface_area = get_info_double(
            subsector_info, "floorToSurfaceArea"
        )
        self.degree_days = get_info_double(
            subsector_info, self.internal_gains.degree_days_key
        )
        super().init_calc(region_name, sector_name, subsector_info, period)

    def get_internal_gains_sign(self):
        return self.internal_gains.sign

    def get_demand_fn_prefix(self, region_name, period):
        return (
            self.saturation
            * self.ave_insulation
            * self.floor_to_surface_area
            * self.degree_days
        )

    def get_effective_internal_gains(self, region_name, period):
        """
        Internal gains as they affect the demand of this technology, negative for cooling.
        """
        internal_gains = self.context.marketplace.get_price(
            self.int_gains_market_name, region_name, period
        )
        if internal_gains == NO_MARKET_PRICE:
            internal_gains = 0.0
        return (
            self.get_internal_gains_sign()
            * internal_gains
            * self.fraction_of_year_active
        )

    def adjust_for_calibration(
        self, subsector_demand, region_name, subsector_info, period
    ):
        """
        subsector_demand is the calibrated demand per unit floor space, not yet adjusted for
        saturation or the other prefix terms. Internal gains are removed from the service
        supplied over the whole floor space before converting back to a per unit weight.
        """
        unit_demand = subsector_demand

        # Amount of service supplied is unit demand times floor space
        floor_space = get_info_double(subsector_info, "floorSpace")
        if floor_space == 0:
            logger.error(
                "Floor space of %s in %s period %s is zero, share weight set to 0.",
                self.name,
                region_name,
                period,
            )
            self.share_weight = 0.0
            return self.share_weight

        effective_demand = unit_demand * floor_space

        # Now adjust for internal gains
        effective_demand -= self.get_effective_internal_gains(region_name, period)
        effective_demand = max(effective_demand, 0.0)

        self.share_weight = self._share_weight_from_demand(
            effective_demand / floor_space, region_name, period
        )
        return self.share_weight


class BuildingHeatingDmdTechnology(BuildingHeatCoolDmdTechnology):
    internal_gains = InternalGains.HEATING


class BuildingCoolingDmdTechnology(BuildingHeatCoolDmdTechnology):
    internal_gains = InternalGains.COOLING
