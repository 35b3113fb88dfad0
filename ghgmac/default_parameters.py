"""
This file contains all default parameters for the GHG MAC model.
"""


class MacDefaults:
    """
    Contains default marginal abatement cost curve parameters.
    baseCostYear and finalReductionYear default to the calendar base year and end year, so they
    are resolved by the MAC against its model context.
    """

    def __init__(self):
        self.defaults = {
            "GHG_MAC": {
                # Number of periods over which the curve ramps in after the base period
                "phaseIn": 1.0,
                # Annual rate at which all costs on the curve decline
                "costReductionRate": 0.0,
                # Range of the carbon price shift driven by the reference fuel. 0 switches the shift off
                "fuelShiftRange": 0.0,
                # Market of the reference fuel, usually natural gas
                "curveShiftFuelName": "",
                # Reduction to be reached by finalReductionYear. 0 switches the cap off
                "finalReduction": 0.0,
                # Force zero reduction when the effective carbon price is negative
                "noBelowZero": False,
                # All MAC curves are keyed off the CO2 price
                "carbonMarketName": "CO2",
                # Policy for a final reduction period of 2 where the ramp has no width
                "techChangeSingularity": "LIMIT",
            },
        }

    def get_defaults(self, type):
        """
        Returns the default MAC parameters as per the specified type.
        """
        return self.defaults[type]


class PriceShiftDefaults:
    """
    Contains the constants of the reference fuel price shift.
    """

    def __init__(self):
        self.defaults = {
            "NATURAL_GAS": {
                # Normalises (1 - priceChangeRatio) to -0.6 at a 50% fuel price drop and 0.4 at a 200% rise.
                # Fitted to the EPA-EMF tables
                "norm_factor": 0.6,
                # Period whose fuel price is the reference for the ratio
                "reference_period": 1,
            },
        }

    def get_defaults(self, type):
        """
        Returns the default price shift constants as per the specified type.
        """
        return self.defaults[type]


class BuildingDefaults:
    """
    Contains default building demand technology parameters.
    """

    def __init__(self):
        self.defaults = {
            "GENERIC": {
                # Fraction of floor space served by the technology
                "saturation": 1.0,
                # Calibrated weight, overwritten by adjust_for_calibration
                "shareWeight": 1.0,
            },
            "HEAT_COOL": {
                "fractionOfYearActive": 0.0,
                # Market supplying internal gains per unit floor space
                "intGainsMarketName": "",
            },
        }

    def get_defaults(self, type):
        """
        Returns the default building technology parameters as per the specified type.
        """
        return self.defaults[type]
