import json
import os
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src", "py")))

from config_loader import DEFAULT_CONFIG, load_config
from simulator import run_simulation
from utils import count_delivered, validate_trajectories


def _small_config(**overrides):
    values = {"floors": 6, "robots": 3, "mail_to_create": 20, "last_delivery_time": 30, "seed": 1}
    values.update(overrides)
    return load_config(overrides=values)


def test_load_config_defaults():
    assert load_config() == DEFAULT_CONFIG


def test_load_config_file_and_overrides(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"floors": 5, "robots": 2}))
    config = load_config(str(path), overrides={"robots": 4, "seed": None})
    assert config["floors"] == 5
    assert config["robots"] == 4
    assert config["seed"] == DEFAULT_CONFIG["seed"]


def test_load_config_rejects_bad_values(tmp_path):
    with pytest.raises(ValueError):
        load_config(overrides={"robots": 0})
    with pytest.raises(ValueError):
        load_config(overrides={"mailroom_floor": 20})
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"elevators": 2}))
    with pytest.raises(ValueError):
        load_config(str(path))


def test_run_simulation_delivers_everything():
    output = run_simulation(_small_config())
    assert output["completed"]
    deliveries = output["deliveries"]
    assert len(deliveries) == output["mail_created"]
    assert len({d["id"] for d in deliveries}) == len(deliveries)
    assert all(d["delivered_time"] > d["arrival_time"] for d in deliveries)
    for data in output["robots"].values():
        assert len(data["trajectory"]) == output["ticks"] + 1
    assert output["summary"]["delivered"] == output["mail_created"]


def test_run_simulation_is_reproducible():
    assert run_simulation(_small_config()) == run_simulation(_small_config())


def test_run_simulation_stops_at_max_ticks():
    output = run_simulation(_small_config(max_ticks=5))
    assert not output["completed"]
    assert output["ticks"] == 5


def test_validate_trajectories():
    validate_trajectories({"R0": [1, 2, 3, 2, 2]}, 1, 3)
    with pytest.raises(RuntimeError):
        validate_trajectories({"R0": [1, 3]}, 1, 5)
    with pytest.raises(RuntimeError):
        validate_trajectories({"R0": [1, 0]}, 1, 5)


def test_count_delivered():
    deliveries = [{"delivered_time": 3}, {"delivered_time": 8}, {"delivered_time": None}]
    assert count_delivered(deliveries, 2) == 0
    assert count_delivered(deliveries, 3) == 1
    assert count_delivered(deliveries, 10) == 2


def test_shipped_config_matches_defaults():
    root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
    assert load_config(os.path.join(root, "configs", "default.json")) == DEFAULT_CONFIG


def test_small_fleet_still_delivers_everything():
    for robots in (1, 2):
        output = run_simulation(_small_config(robots=robots))
        assert output["completed"]
        assert output["summary"]["delivered"] == output["mail_created"]
