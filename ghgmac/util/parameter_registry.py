"""
Declarative mapping from configuration keys to object attributes.
Each model object owns a registry; variants extend their parent's registry with their own keys.
"""

import logging
from enum import Enum

from ghgmac.util.enumerations import ValueType

logger = logging.getLogger(__name__)


def parse_value(raw, value_type):
    """
    Converts a raw configuration value into the given type.
    Raises ValueError or TypeError if the value cannot be converted.
    """
    match value_type:
        case ValueType.FLOAT:
            value = float(raw)
        case ValueType.INT:
            value = int(raw)
        case ValueType.STRING:
            value = str(raw)
        case ValueType.BOOL:
            if isinstance(raw, str):
                if raw.strip().lower() in ("1", "true", "yes"):
                    value = True
                elif raw.strip().lower() in ("0", "false", "no"):
                    value = False
                else:
                    raise ValueError(raw + " is not a boolean.")
            else:
                value = bool(raw)
        case ValueType.POINTS:
            value = [parse_point(point) for point in raw]
        case _:
            raise TypeError(str(value_type) + " is not a known value type.")
    return value


def parse_point(point):
    """
    A point is either an (x, y) pair or a mapping with "tax" and "reduction" entries.
    """
    if isinstance(point, dict):
        return (float(point["tax"]), float(point["reduction"]))
    x, y = point
    return (float(x), float(y))


class Parameter:
    """
    One configuration key: the attribute it sets, how to parse it and its default.
    A callable default is called with the model context. A validator returns False for values
    that parse but are out of range.
    """

    def __init__(
        self, key, attribute, value_type, default=None, converter=None, validator=None
    ):
        self.key = key
        self.attribute = attribute
        self.value_type = value_type
        self.default = default
        self.converter = converter
        self.validator = validator

    def parse(self, raw):
        value = parse_value(raw, self.value_type)
        if self.converter is not None:
            value = self.converter(value)
        return value

    def get_default(self, context):
        default = self.default(context) if callable(self.default) else self.default
        if self.converter is not None and default is not None:
            default = self.converter(default)
        return default


class ParameterRegistry:
    """
    Ordered set of Parameters for one kind of object.
    """

    def __init__(self, name, parameters=()):
        self.name = name
        self.parameters = {}
        for parameter in parameters:
            self.register(parameter)

    def register(self, parameter):
        if parameter.key in self.parameters:
            raise ValueError(
                "Key " + parameter.key + " is already registered for " + self.name
            )
        self.parameters[parameter.key] = parameter
        return parameter

    def extend(self, name, parameters=()):
        """
        Returns a new registry holding this registry's parameters followed by the given ones.
        """
        registry = ParameterRegistry(name, self.parameters.values())
        for parameter in parameters:
            registry.register(parameter)
        return registry

    def keys(self):
        return list(self.parameters)

    def get(self, key):
        """
        Finds a parameter by configuration key or by attribute name.
        """
        if key in self.parameters:
            return self.parameters[key]
        for parameter in self.parameters.values():
            if parameter.attribute == key:
                return parameter
        return None

    def __contains__(self, key):
        return key in self.parameters

    def apply_defaults(self, target, context=None):
        for parameter in self.parameters.values():
            setattr(target, parameter.attribute, parameter.get_default(context))

    def parse(self, config, target):
        """
        Sets the attributes of target from a mapping keyed by configuration keys or attribute names.
        Unknown keys and unreadable or out of range values are logged and skipped.
        """
        for key, raw in config.items():
            parameter = self.get(key)
            if parameter is None:
                logger.warning(
                    "Unrecognized text string: %s found while parsing %s.",
                    key,
                    self.name,
                )
                continue
            try:
                value = parameter.parse(raw)
            except (ValueError, TypeError, KeyError) as error:
                logger.warning(
                    "Could not read %s while parsing %s, keeping %s. %s",
                    key,
                    self.name,
                    getattr(target, parameter.attribute, None),
                    error,
                )
                continue
            if parameter.validator is not None and not parameter.validator(value):
                logger.warning(
                    "Value %s of %s is out of range while parsing %s, keeping %s.",
                    raw,
                    key,
                    self.name,
                    getattr(target, parameter.attribute, None),
                )
                continue
            setattr(target, parameter.attribute, value)

    def to_config(self, target, context=None, skip_defaults=True):
        """
        Returns the configuration mapping of target. Values equal to their default are left out
        unless skip_defaults is False.
        """
        config = {}
        for parameter in self.parameters.values():
            value = getattr(target, parameter.attribute)
            if skip_defaults and value == parameter.get_default(context):
                continue
            if isinstance(value, Enum):
                value = value.name
            config[parameter.key] = value
        return config
