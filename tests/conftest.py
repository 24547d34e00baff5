"""Shared pytest fixtures for all test modules."""

import os
import subprocess
import sys

import pytest
import yaml


PROJECT_ROOT = os.path.normpath(os.path.join(os.path.dirname(__file__), ".."))


@pytest.fixture(scope="session")
def project_root():
    """Absolute path to the project root directory."""
    return PROJECT_ROOT


@pytest.fixture(scope="session")
def run_cli(project_root):
    """Return a callable that invokes the servicedock CLI as a subprocess."""

    def _run(*args):
        result = subprocess.run(
            [sys.executable, "-m", "servicedock.servicedock", *args],
            capture_output=True,
            text=True,
            cwd=project_root,
        )
        return result.returncode, result.stdout, result.stderr

    return _run


@pytest.fixture
def make_config(tmp_path):
    """Return a factory that writes a temporary servicedock config.yaml."""

    def _make(config=None):
        if config is None:
            config = {
                "defaults": {
                    "timeout": 120,
                    "poll_interval": 5,
                    "ssh_user": "core",
                },
                "targets": {
                    "worker-1": {
                        "address": "10.0.0.5",
                        "ssh_user": "ubuntu",
                        "health_url": "http://10.0.0.5:10248/healthz",
                    },
                    "worker-2": {},
                },
                "kubectl": {"context": "prod"},
            }
        config_path = tmp_path / "config.yaml"
        with open(config_path, "w") as f:
            yaml.dump(config, f)
        return str(config_path)

    return _make
