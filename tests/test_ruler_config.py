"""Config defaults and JSON overlay."""

import json

import pytest

from ruler_config import RulerConfig, get_defaults, load_config
from ruler_models import InvalidParameterError


def test_defaults():
    config = get_defaults()
    assert config.edo_values == [12]
    assert config.prime_limit == 7
    assert config.odd_limit == 15
    assert config.ruler_height == 1200
    assert config.output == "ruler.svg"


def test_defaults_do_not_share_edo_list():
    a, b = get_defaults(), get_defaults()
    a.edo_values.append(19)
    assert b.edo_values == [12]


def test_load_config_none_and_missing(tmp_path):
    assert load_config(None) == RulerConfig()
    assert load_config(str(tmp_path / "nope.json")) == RulerConfig()


def test_load_config_overlays_defaults(tmp_path):
    path = tmp_path / "ruler.json"
    path.write_text(json.dumps({"edo_values": [12, 31], "odd_limit": 9}))
    config = load_config(str(path))
    assert config.edo_values == [12, 31]
    assert config.odd_limit == 9
    assert config.prime_limit == 7


def test_load_config_single_edo_int(tmp_path):
    path = tmp_path / "ruler.json"
    path.write_text(json.dumps({"edo_values": 22}))
    assert load_config(str(path)).edo_values == [22]


def test_load_config_rejects_unknown_keys(tmp_path):
    path = tmp_path / "ruler.json"
    path.write_text(json.dumps({"edo": 12}))
    with pytest.raises(InvalidParameterError):
        load_config(str(path))


def test_load_config_rejects_non_object(tmp_path):
    path = tmp_path / "ruler.json"
    path.write_text("[12, 19]")
    with pytest.raises(InvalidParameterError):
        load_config(str(path))


@pytest.mark.parametrize("data", [
    {"edo_values": "12,19"},
    {"edo_values": [12, "19"]},
    {"edo_values": [12.5]},
    {"edo_values": True},
    {"prime_limit": "7"},
    {"odd_limit": 9.0},
    {"ruler_height": True},
    {"output": 5},
])
def test_load_config_rejects_wrong_value_types(tmp_path, data):
    path = tmp_path / "ruler.json"
    path.write_text(json.dumps(data))
    key = next(iter(data))
    with pytest.raises(InvalidParameterError, match=key):
        load_config(str(path))
