"""Dry-run end-to-end tests for the service and status commands."""


def test_service_restart_dry_run(run_cli):
    rc, stdout, _ = run_cli(
        "service", "restart",
        "--node", "worker-1",
        "--address", "10.0.0.5",
        "--ssh-user", "core",
        "--dry-run",
    )
    assert rc == 0
    assert "[dry-run] ssh core@10.0.0.5: sudo systemctl restart kubelet" in stdout
    assert "dry-run (not applied)" in stdout
    # systemctl is assumed present in dry-run, so no fallback
    assert "sudo service kubelet restart" not in stdout


def test_service_restart_waits_in_order(run_cli):
    rc, stdout, _ = run_cli(
        "service", "restart",
        "--node", "worker-1",
        "--address", "10.0.0.5",
        "--timeout", "45",
        "--dry-run",
    )
    assert rc == 0
    not_ready = stdout.index("Waiting up to 45.0s for node worker-1 (10.0.0.5) to be NotReady")
    ready = stdout.index("Waiting up to 45.0s for node worker-1 (10.0.0.5) to be Ready")
    assert not_ready < ready


def test_service_stop_only_waits_not_ready(run_cli):
    rc, stdout, _ = run_cli(
        "service", "stop",
        "--node", "worker-1",
        "--address", "10.0.0.5",
        "--service", "docker",
        "--no-sudo",
        "--dry-run",
    )
    assert rc == 0
    assert "[dry-run] ssh 10.0.0.5: systemctl stop docker" in stdout
    assert "to be NotReady" in stdout
    assert "to be Ready" not in stdout


def test_service_start_resolves_via_kubectl(run_cli):
    rc, stdout, _ = run_cli(
        "service", "start",
        "--node", "worker-1",
        "--dry-run",
    )
    assert rc == 0
    assert "[dry-run] kubectl get node worker-1 -o json" in stdout
    assert "[dry-run] ssh dry-run-address: sudo systemctl start kubelet" in stdout
    assert "to be Ready" in stdout
    assert "to be NotReady" not in stdout


def test_service_uses_config_target(run_cli, make_config):
    rc, stdout, _ = run_cli(
        "service", "start",
        "--node", "worker-1",
        "--config", make_config(),
        "--dry-run",
    )
    assert rc == 0
    assert "[dry-run] ssh ubuntu@10.0.0.5: sudo systemctl start kubelet" in stdout
    assert "Waiting up to 120s" in stdout


def test_service_invalid_action(run_cli):
    rc, _, stderr = run_cli("service", "reload", "--node", "worker-1", "--dry-run")
    assert rc != 0
    assert "invalid choice" in stderr


def test_service_invalid_timeout(run_cli):
    rc, stdout, _ = run_cli(
        "service", "start",
        "--node", "worker-1",
        "--timeout", "0",
        "--dry-run",
    )
    assert rc == 1
    assert "timeout must be positive" in stdout


def test_service_missing_config(run_cli, tmp_path):
    rc, stdout, _ = run_cli(
        "service", "start",
        "--node", "worker-1",
        "--config", str(tmp_path / "missing.yaml"),
        "--dry-run",
    )
    assert rc == 1
    assert "not found" in stdout


def test_service_bad_config_key(run_cli, make_config):
    path = make_config({"defaults": {"timout": 5}})
    rc, stdout, _ = run_cli(
        "service", "start",
        "--node", "worker-1",
        "--config", path,
        "--dry-run",
    )
    assert rc == 1
    assert "timout" in stdout


def test_status_unreachable_health_url(run_cli):
    rc, stdout, _ = run_cli(
        "status",
        "--node", "worker-1",
        "--health-url", "http://127.0.0.1:1/healthz",
    )
    assert rc == 1
    assert "worker-1: NotReady" in stdout


def test_service_empty_service_name(run_cli):
    rc, stdout, stderr = run_cli(
        "service", "start",
        "--node", "worker-1",
        "--service", "",
        "--dry-run",
    )
    assert rc == 1
    assert "Service name must be a non-empty string" in stdout
    assert "Traceback" not in stderr


def test_service_wrong_type_in_config(run_cli, make_config):
    path = make_config({"defaults": {"timeout": "60"}})
    rc, stdout, stderr = run_cli(
        "service", "start",
        "--node", "worker-1",
        "--config", path,
        "--dry-run",
    )
    assert rc == 1
    assert "timeout must be a number, got '60'" in stdout
    assert "Traceback" not in stderr


def test_verbose_after_subcommand(run_cli):
    rc, stdout, _ = run_cli(
        "service", "restart",
        "--node", "worker-1",
        "--address", "10.0.0.5",
        "--verbose",
        "--dry-run",
    )
    assert rc == 0
    assert "sudo systemctl restart kubelet" in stdout


def test_verbose_before_subcommand_is_kept(run_cli):
    rc, stdout, _ = run_cli(
        "--verbose",
        "service", "start",
        "--node", "worker-1",
        "--address", "10.0.0.5",
        "--dry-run",
    )
    assert rc == 0
    assert "sudo systemctl start kubelet" in stdout
