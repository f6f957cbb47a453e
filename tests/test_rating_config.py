import pytest

from gambitratings import RatingConfig
from gambitratings.exceptions import InvalidConfigurationException


def test_defaults_match_legacy_algorithm():
    config = RatingConfig()
    assert config.max_iterations_phase1 == 30
    assert config.max_iterations_phase2 == 1
    assert config.convergence_threshold == 0.5
    assert config.allow_phase2_new_bonuses
    assert not config.update_bonuses
    assert config.name == "custom"


@pytest.mark.parametrize(
    "name,phase2,threshold,phase2_bonuses,update_bonuses",
    [
        ("legacy", 1, 0.5, True, False),
        ("converged", 30, 0.5, True, False),
        ("improved", 30, 0.1, False, True),
    ],
)
def test_presets(name, phase2, threshold, phase2_bonuses, update_bonuses):
    config = RatingConfig.preset(name)
    assert config.name == name
    assert config.max_iterations_phase1 == 30
    assert config.max_iterations_phase2 == phase2
    assert config.convergence_threshold == threshold
    assert config.allow_phase2_new_bonuses is phase2_bonuses
    assert config.update_bonuses is update_bonuses


def test_preset_names_are_forgiving():
    assert RatingConfig.preset(" Improved ").name == "improved"


def test_unknown_preset():
    with pytest.raises(InvalidConfigurationException, match="Unknown rating preset"):
        RatingConfig.preset("fastest")


def test_for_version():
    assert RatingConfig.for_version(0).name == "legacy"
    assert RatingConfig.for_version(1).name == "converged"
    assert RatingConfig.for_version(2).name == "improved"
    assert RatingConfig.for_version(3).name == "improved"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"max_iterations_phase1": 0},
        {"max_iterations_phase2": -1},
        {"max_iterations_phase1": 2.5},
        {"convergence_threshold": 0},
        {"convergence_threshold": -0.1},
    ],
)
def test_invalid_configuration(kwargs):
    with pytest.raises(InvalidConfigurationException):
        RatingConfig(**kwargs)


def test_dict_round_trip():
    config = RatingConfig.preset("improved")
    data = config.to_dict()
    assert data["update_bonuses"] is True
    assert RatingConfig.from_dict(data) == config
    assert RatingConfig.from_dict({}) == RatingConfig()
