"""Tests for config loading, validation and parameter precedence."""

import pytest

from servicedock.config import (
    build_params,
    kubectl_settings,
    load_config,
    target_from_config,
    validate_config,
)
from servicedock.control.params import NODE_STATE_TIMEOUT, ControlParams


# ── load_config ──────────────────────────────────────────────────


def test_load_config(make_config):
    config = load_config(make_config())
    assert config["defaults"]["timeout"] == 120
    assert config["targets"]["worker-1"]["address"] == "10.0.0.5"


def test_load_config_missing_file_exits(tmp_path):
    with pytest.raises(SystemExit) as exc_info:
        load_config(str(tmp_path / "nope.yaml"))
    assert exc_info.value.code == 1


def test_load_config_bad_yaml_exits(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("defaults: [unclosed\n")
    with pytest.raises(SystemExit):
        load_config(str(path))


def test_load_config_empty_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("")
    assert load_config(str(path)) == {}


# ── validate_config ──────────────────────────────────────────────


def test_validate_config_accepts_sample(make_config):
    validate_config(load_config(make_config()))


@pytest.mark.parametrize("config, match", [
    ({"servers": {}}, "Unknown config section"),
    ({"defaults": {"timout": 5}}, "timout"),
    ({"kubectl": {"namespace": "x"}}, "namespace"),
    ({"targets": {"worker-1": {"port": 22}}}, "target 'worker-1'"),
    ({"targets": ["worker-1"]}, "must be a mapping"),
])
def test_validate_config_rejects(config, match):
    with pytest.raises(ValueError, match=match):
        validate_config(config)


# ── build_params ─────────────────────────────────────────────────


def test_build_params_defaults():
    params = build_params({})
    assert params == ControlParams()
    assert params.timeout == NODE_STATE_TIMEOUT
    assert params.validate_fallback is False


def test_build_params_precedence(make_config):
    config = load_config(make_config())
    params = build_params(config, {"timeout": 30, "poll_interval": None, "dry_run": None})

    assert params.timeout == 30
    assert params.poll_interval == 5
    assert params.ssh_user == "core"
    assert params.dry_run is False


@pytest.mark.parametrize("overrides", [
    {"timeout": 0},
    {"poll_interval": -1},
    {"command_timeout": 0},
    {"ssh_port": 70000},
])
def test_build_params_invalid_values(overrides):
    with pytest.raises(ValueError):
        build_params({}, overrides)


# ── targets ──────────────────────────────────────────────────────


def test_target_from_config(make_config):
    config = load_config(make_config())
    target, settings = target_from_config(config, "worker-1")

    assert target.address == "10.0.0.5"
    assert target.ssh_user == "ubuntu"
    assert settings == {"health_url": "http://10.0.0.5:10248/healthz"}


def test_target_from_config_cli_overrides(make_config):
    config = load_config(make_config())
    target, _ = target_from_config(config, "worker-1", address="192.0.2.1", ssh_user="admin")

    assert target.address == "192.0.2.1"
    assert target.ssh_user == "admin"


def test_target_not_in_config():
    target, settings = target_from_config({}, "worker-7")

    assert target.node_name == "worker-7"
    assert target.address is None
    assert settings == {}


def test_kubectl_settings(make_config):
    assert kubectl_settings(load_config(make_config())) == {"context": "prod"}
    assert kubectl_settings({}) == {}


@pytest.mark.parametrize("overrides, match", [
    ({"timeout": "60"}, "timeout must be a number"),
    ({"poll_interval": True}, "poll_interval must be a number"),
    ({"ssh_port": "22"}, "ssh_port must be a number"),
    ({"ssh_port": 22.5}, "ssh_port must be a number"),
])
def test_build_params_wrong_types(overrides, match):
    with pytest.raises(ValueError, match=match):
        build_params({}, overrides)
