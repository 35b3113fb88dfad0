import logging

import numpy as np
import pytest
from ghgmac.technologies.building_dmd_technology import (
    HEAT_COOL_DMD_PARAMETERS,
    BuildingCoolingDmdTechnology,
    BuildingGenericDmdTechnology,
    BuildingHeatingDmdTechnology,
)
from ghgmac.util.model_context import ModelContext


@pytest.fixture
def context() -> ModelContext:
    context = ModelContext.from_years(2005, 2050, 5)
    context.marketplace.set_price("internal gains", "USA", 2, 10.0)
    return context


@pytest.fixture
def subsector_info():
    return {
        "aveInsulation": 2.0,
        "floorToSurfaceArea": 0.5,
        "heatingDegreeDays": 3.0,
        "coolingDegreeDays": 1.5,
        "floorSpace": 100.0,
    }


def create_technology(technology_class, context, **kwargs):
    defaults = {
        "saturation": 0.8,
        "fractionOfYearActive": 0.5,
        "intGainsMarketName": "internal gains",
    }
    defaults.update(kwargs)
    return technology_class("space heating", 2005, context, **defaults)


def test_heating_calibration(context, subsector_info):
    technology = create_technology(BuildingHeatingDmdTechnology, context)
    technology.init_calc("USA", "building", subsector_info, 2)

    share_weight = technology.adjust_for_calibration(4.0, "USA", subsector_info, 2)

    # Internal gains of 10 * 0.5 lower the heating service of 4 * 100
    demand_fn_prefix = 0.8 * 2.0 * 0.5 * 3.0
    np.testing.assert_allclose(technology.get_effective_internal_gains("USA", 2), 5.0)
    np.testing.assert_allclose(share_weight, ((400.0 - 5.0) / 100.0) / demand_fn_prefix)
    assert technology.share_weight == share_weight


def test_cooling_calibration(context, subsector_info):
    technology = create_technology(BuildingCoolingDmdTechnology, context)
    technology.init_calc("USA", "building", subsector_info, 2)

    share_weight = technology.adjust_for_calibration(4.0, "USA", subsector_info, 2)

    # Internal gains add to the cooling service
    demand_fn_prefix = 0.8 * 2.0 * 0.5 * 1.5
    assert technology.get_internal_gains_sign() == -1
    np.testing.assert_allclose(share_weight, ((400.0 + 5.0) / 100.0) / demand_fn_prefix)


def test_effective_demand_is_not_negative(context, subsector_info):
    technology = create_technology(BuildingHeatingDmdTechnology, context)
    technology.init_calc("USA", "building", subsector_info, 2)

    assert technology.adjust_for_calibration(0.01, "USA", subsector_info, 2) == 0


def test_zero_floor_space(context, subsector_info, caplog):
    caplog.set_level(logging.ERROR)
    technology = create_technology(BuildingHeatingDmdTechnology, context)
    technology.init_calc("USA", "building", subsector_info, 2)
    subsector_info["floorSpace"] = 0.0

    assert technology.adjust_for_calibration(4.0, "USA", subsector_info, 2) == 0
    assert "Floor space" in caplog.text


def test_missing_subsector_info(context, caplog):
    caplog.set_level(logging.ERROR)
    technology = create_technology(BuildingHeatingDmdTechnology, context)

    technology.init_calc("USA", "building", {"floorSpace": 100.0}, 2)

    assert technology.ave_insulation == 0
    assert "aveInsulation" in caplog.text
    # Prefix is zero without the building shell values
    assert technology.adjust_for_calibration(4.0, "USA", {"floorSpace": 100.0}, 2) == 0


def test_missing_internal_gains_market(context, subsector_info, caplog):
    caplog.set_level(logging.ERROR)
    technology = create_technology(
        BuildingHeatingDmdTechnology, context, intGainsMarketName="appliance gains"
    )
    technology.init_calc("USA", "building", subsector_info, 2)

    assert technology.get_effective_internal_gains("USA", 2) == 0
    assert "appliance gains" in caplog.text


def test_generic_calibration(context):
    technology = BuildingGenericDmdTechnology("lighting", 2005, context, saturation=0.5)

    share_weight = technology.adjust_for_calibration(2.0, "USA", {}, 2)

    np.testing.assert_allclose(share_weight, 4.0)


def test_registry_composition():
    keys = HEAT_COOL_DMD_PARAMETERS.keys()

    assert keys == [
        "saturation",
        "shareWeight",
        "fractionOfYearActive",
        "intGainsMarketName",
    ]


def test_generic_technology_ignores_heat_cool_keys(context, caplog):
    caplog.set_level(logging.WARNING)

    technology = BuildingGenericDmdTechnology.from_config(
        "lighting", 2005, {"fractionOfYearActive": 0.5}, context
    )

    assert not hasattr(technology, "fraction_of_year_active")
    assert "fractionOfYearActive" in caplog.text


def test_to_config(context):
    technology = create_technology(BuildingHeatingDmdTechnology, context)

    assert technology.to_config() == {
        "saturation": 0.8,
        "fractionOfYearActive": 0.5,
        "intGainsMarketName": "internal gains",
    }


def test_config_keys_named_like_arguments(context, caplog):
    caplog.set_level(logging.WARNING)

    technology = BuildingHeatingDmdTechnology.from_config(
        "space heating", 2005, {"name": "other", "year": 2020, "saturation": 0.5}, context
    )

    assert technology.name == "space heating"
    assert technology.year == 2005
    assert technology.saturation == 0.5
    assert "string: year found" in caplog.text
