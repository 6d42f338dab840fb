import numpy as np
import pytest

from forcelayout.config import LayoutConfig
from forcelayout.errors import InvalidArgumentError


def test_defaults_match_engine_constants():
    config = LayoutConfig()
    assert config.attraction == pytest.approx(0.0025)
    assert config.repulsion == pytest.approx(100.0)
    assert config.epsilon == pytest.approx(0.1)
    assert config.friction == pytest.approx(0.60)
    assert config.inner_distance == pytest.approx(0.036)
    assert config.gravity == pytest.approx(0.070)
    assert config.minimum_velocity == 0.0


def test_overrides_return_a_new_config():
    config = LayoutConfig()
    changed = config.with_overrides(repulsion=5, friction=0.1)
    assert changed.repulsion == 5.0
    assert isinstance(changed.repulsion, float)
    assert changed.friction == pytest.approx(0.1)
    assert config.repulsion == 100.0


def test_unknown_option_is_rejected():
    with pytest.raises(InvalidArgumentError, match="theta"):
        LayoutConfig().with_overrides(theta=0.5)


@pytest.mark.parametrize(
    "overrides",
    [
        {"friction": 1.5},
        {"epsilon": -0.1},
        {"inner_distance": -1.0},
        {"repulsion": float("nan")},
        {"gravity": "strong"},
        {"attraction": True},
    ],
)
def test_invalid_values_are_rejected(overrides):
    with pytest.raises(InvalidArgumentError):
        LayoutConfig(**overrides)


def test_dict_round_trip():
    config = LayoutConfig(attraction=0.01, gravity=0.0)
    assert LayoutConfig.from_dict(config.to_dict()) == config


def test_numpy_scalars_are_accepted_as_floats():
    config = LayoutConfig(repulsion=np.int64(50), friction=np.float32(0.5))
    assert config.repulsion == 50.0
    assert type(config.repulsion) is float
    assert config.friction == pytest.approx(0.5)
    assert type(config.friction) is float


def test_numpy_bool_is_not_a_number():
    with pytest.raises(InvalidArgumentError):
        LayoutConfig(gravity=np.bool_(True))
