"""
This file contains all custom-made enumerations for the GHG MAC model.
"""

from enum import Enum


class ValueType(Enum):
    """
    Types a configuration value can be parsed into
    """

    FLOAT = "float"
    INT = "int"
    STRING = "str"
    BOOL = "bool"
    POINTS = "List[Tuple[float, float]]"


class InternalGains(Enum):
    """
    Sign of internal gains on building service demand.
    Tuple: (sign, degree day key in the subsector info)
    """

    HEATING = (1, "heatingDegreeDays")
    COOLING = (-1, "coolingDegreeDays")

    @property
    def sign(self):
        return self.value[0]

    @property
    def degree_days_key(self):
        return self.value[1]


class TechChangeSingularity(Enum):
    """
    How the tech change cap behaves when the final reduction period is 2,
    where the linear ramp from period 2 has no width.
    """

    LIMIT = 0  # Ramp collapses to a step reaching the full cap at period 2
    SKIP = 1  # Cap is not applied

    @staticmethod
    def from_name(name):
        if isinstance(name, TechChangeSingularity):
            return name
        for enum in TechChangeSingularity:
            if enum.name == str(name).upper():
                return enum
        raise ValueError(
            "Unknown tech change policy "
            + str(name)
            + ". It should be one of "
            + ", ".join(enum.name for enum in TechChangeSingularity)
        )
