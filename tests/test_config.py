"""Tests for simulation configuration loading and validation."""

import pytest
from lifeloop.config import SimulationConfig, config_from_dict, load_config
from lifeloop.exceptions import ConfigurationError
from lifeloop.patterns.seeds import glider_pair_seed


class TestDefaults:
    """Test the built-in defaults."""

    def test_default_values(self):
        cfg = SimulationConfig()
        assert cfg.width == 25
        assert cfg.height == 25
        assert cfg.history_capacity == 100
        assert cfg.max_generations is None
        assert cfg.seed is None

    def test_default_seed_is_centred_glider_pair(self):
        """Two T shapes anchored at the board centre."""
        seed = SimulationConfig().resolved_seed()
        assert seed == {
            (13, 12), (13, 13), (12, 13), (13, 14),
            (18, 12), (18, 13), (19, 13), (18, 14),
        }

    def test_default_config_is_valid(self):
        cfg = SimulationConfig()
        assert cfg.validate() is cfg

    def test_default_seed_follows_dimensions(self):
        cfg = SimulationConfig(width=40, height=30)
        assert cfg.resolved_seed() == glider_pair_seed(40, 30)


class TestOverrides:
    """Test applying command-line overrides."""

    def test_none_values_ignored(self):
        cfg = SimulationConfig(width=30).with_overrides(width=None, height=12)
        assert cfg.width == 30
        assert cfg.height == 12

    def test_source_config_unchanged(self):
        cfg = SimulationConfig()
        cfg.with_overrides(history_capacity=5)
        assert cfg.history_capacity == 100


class TestValidation:
    """Test rejection of values the board cannot run with."""

    @pytest.mark.parametrize("field,value", [
        ("width", 0),
        ("height", -3),
        ("history_capacity", 0),
        ("max_generations", -1),
    ])
    def test_out_of_range_values(self, field, value):
        cfg = SimulationConfig(seed=frozenset()).with_overrides(**{field: value})
        with pytest.raises(ConfigurationError, match=field):
            cfg.validate()

    def test_seed_outside_grid(self):
        cfg = SimulationConfig(width=5, height=5, seed=frozenset({(5, 0)}))
        with pytest.raises(ConfigurationError, match="seed"):
            cfg.validate()

    def test_default_seed_too_big_for_small_grid(self):
        """The glider pair needs room to the right of the centre."""
        with pytest.raises(ConfigurationError, match="seed"):
            SimulationConfig(width=8, height=8).validate()

    def test_zero_generations_allowed(self):
        SimulationConfig(max_generations=0).validate()


class TestConfigFromDict:
    """Test building configs from parsed mappings."""

    def test_full_mapping(self):
        cfg = config_from_dict({
            "width": 10,
            "height": 8,
            "history_capacity": 20,
            "max_generations": 50,
            "seed": [[1, 1], [2, 1], [3, 1]],
        })
        assert cfg == SimulationConfig(10, 8, 20, 50, frozenset({(1, 1), (2, 1), (3, 1)}))

    def test_empty_mapping_gives_defaults(self):
        assert config_from_dict({}) == SimulationConfig()

    def test_unknown_keys_rejected(self):
        with pytest.raises(ConfigurationError, match="Unknown config keys: rules"):
            config_from_dict({"rules": "B36/S23"})

    @pytest.mark.parametrize("seed", ["1,1", [[1, 2, 3]], [5]])
    def test_malformed_seed(self, seed):
        with pytest.raises(ConfigurationError, match="seed"):
            config_from_dict({"seed": seed})

    def test_non_numeric_value(self):
        with pytest.raises(ConfigurationError, match="'width': must be an integer"):
            config_from_dict({"width": "wide"})

    @pytest.mark.parametrize("field,value", [
        ("width", 2.9),
        ("height", 12.0),
        ("history_capacity", True),
        ("max_generations", 10.5),
        ("max_generations", False),
        ("width", "25"),
    ])
    def test_non_integer_values_rejected(self, field, value):
        """Floats are not truncated and booleans do not pass as 0 or 1."""
        with pytest.raises(ConfigurationError, match=field) as exc_info:
            config_from_dict({field: value, "seed": []})
        assert exc_info.value.config_key == field

    @pytest.mark.parametrize("seed", [[[True, 1]], [[1.5, 2]], [[1, "2"]]])
    def test_non_integer_seed_coordinates_rejected(self, seed):
        with pytest.raises(ConfigurationError) as exc_info:
            config_from_dict({"seed": seed})
        assert exc_info.value.config_key == "seed"


class TestLoadConfig:
    """Test reading YAML files."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "run.yaml"
        path.write_text(
            "width: 12\n"
            "height: 10\n"
            "history_capacity: 4\n"
            "seed:\n"
            "  - [2, 2]\n"
            "  - [3, 2]\n"
            "  - [2, 3]\n"
            "  - [3, 3]\n"
        )
        cfg = load_config(path)
        assert cfg.width == 12
        assert cfg.height == 10
        assert cfg.history_capacity == 4
        assert cfg.seed == {(2, 2), (3, 2), (2, 3), (3, 3)}

    def test_yaml_float_and_bool_rejected(self, tmp_path):
        path = tmp_path / "typed.yaml"
        path.write_text("width: 2.9\n")
        with pytest.raises(ConfigurationError, match="width"):
            load_config(path)

        path.write_text("seed:\n  - [true, 1]\n")
        with pytest.raises(ConfigurationError, match="seed"):
            load_config(path)

    def test_empty_file_gives_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == SimulationConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Failed to parse config"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("width: [1, 2\n")
        with pytest.raises(ConfigurationError, match="Failed to parse config"):
            load_config(path)

    def test_non_mapping_document(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError, match="must contain a mapping"):
            load_config(path)
