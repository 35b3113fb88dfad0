import logging

import numpy as np
from ghgmac.abatement.tech_change import TechChangeAdjuster, cap_multiplier
from ghgmac.util.enumerations import TechChangeSingularity


def test_cap_ramp():
    # change = 0.5 / 1.0, ramp from period 2 to period 6
    np.testing.assert_allclose(cap_multiplier(4, 6, 0.5, 1.0), 0.25)
    np.testing.assert_allclose(cap_multiplier(6, 6, 0.5, 1.0), 0.5)
    np.testing.assert_allclose(cap_multiplier(2, 6, 0.5, 1.0), 0.0)


def test_cap_is_flat_after_final_period():
    assert cap_multiplier(7, 6, 0.5, 1.0) == 0.5
    assert cap_multiplier(20, 6, 0.5, 1.0) == 0.5


def test_cap_before_period_two_is_negative():
    # The ramp is extended backwards as it is
    np.testing.assert_allclose(cap_multiplier(1, 6, 0.5, 1.0), -0.125)


def test_final_period_two_limit():
    multipliers = [cap_multiplier(period, 2, 0.5, 1.0) for period in range(0, 6)]

    assert np.all(np.isfinite(multipliers))
    np.testing.assert_allclose(multipliers, [0, 0, 0.5, 0.5, 0.5, 0.5])


def test_final_period_two_skip(caplog):
    caplog.set_level(logging.WARNING)

    multiplier = cap_multiplier(3, 2, 0.5, 1.0, singularity=TechChangeSingularity.SKIP)

    assert multiplier == 1.0
    assert "tech change cap is not applied" in caplog.text


def test_adjuster():
    adjuster = TechChangeAdjuster(1.0)

    assert adjuster.applies(0.5, 6)
    # Target below the curve maximum
    assert not adjuster.applies(1.2, 6)
    # Final reduction period at or before period 1
    assert not adjuster.applies(0.5, 1)
    np.testing.assert_allclose(adjuster.cap_multiplier(4, 6, 0.5), 0.25)


def test_adjuster_without_final_reduction():
    adjuster = TechChangeAdjuster(0.0)

    assert not adjuster.applies(-0.2, 6)
    assert not adjuster.applies(0.5, 6)


def test_singularity_from_name():
    assert TechChangeSingularity.from_name("skip") == TechChangeSingularity.SKIP
    assert (
        TechChangeSingularity.from_name(TechChangeSingularity.LIMIT)
        == TechChangeSingularity.LIMIT
    )
