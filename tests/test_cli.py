"""Tests for the supplier-registry CLI."""

import json
import tempfile
from pathlib import Path

import pytest
from click.testing import CliRunner

from supplier_registry.cli import main
from supplier_registry.config import DEFAULT_ADMIN
from supplier_registry.store.file_store import RegistryStore

SUPPLIER = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"
OUTSIDER = "ST3NBRSFKX28FQ2ZJ1MAKX58HKHSDGNV5N7R21XCP"


@pytest.fixture(autouse=True)
def _quiet_env(monkeypatch):
    monkeypatch.delenv("SUPPLIER_REGISTRY_ADMIN", raising=False)
    monkeypatch.delenv("SUPPLIER_REGISTRY_STATE", raising=False)
    monkeypatch.setenv("SUPPLIER_REGISTRY_LOG_LEVEL", "WARNING")


def _run(state: Path, *args: str):
    return CliRunner().invoke(main, ["--state", str(state), *args])


def test_register_and_show():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "state.json"

        result = _run(state, "register", "Acme Parts", "Manufacturing", "--as", SUPPLIER)
        assert result.exit_code == 0, result.output
        assert "registered at height 1" in result.output

        result = _run(state, "show", SUPPLIER)
        assert result.exit_code == 0
        assert "Acme Parts" in result.output
        assert "Manufacturing" in result.output


def test_register_twice_exits_nonzero():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "state.json"
        _run(state, "register", "Acme Parts", "Manufacturing", "--as", SUPPLIER)

        result = _run(state, "register", "Acme Parts 2", "Manufacturing", "--as", SUPPLIER)
        assert result.exit_code == 1
        assert "AlreadyRegistered" in result.output
        assert "code 1" in result.output


def test_verify_flow():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "state.json"
        _run(state, "register", "Supplier Corp", "Electronics", "--as", SUPPLIER)

        result = _run(state, "verify", SUPPLIER, "85", "--as", OUTSIDER)
        assert result.exit_code == 1
        assert "NotAuthorized" in result.output

        result = _run(state, "verify", SUPPLIER, "85", "--as", DEFAULT_ADMIN)
        assert result.exit_code == 0, result.output

        env = RegistryStore(state).load(DEFAULT_ADMIN)
        assert env.height == 3
        details = env.get_supplier_details(SUPPLIER)
        assert details.is_verified
        assert details.verification_score == 85
        assert details.verification_height == 3


def test_verify_unregistered():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "state.json"
        result = _run(state, "verify", SUPPLIER, "85", "--as", DEFAULT_ADMIN)
        assert result.exit_code == 1
        assert "SupplierNotFound" in result.output


def test_status_and_show_unknown():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "state.json"

        result = _run(state, "status", SUPPLIER)
        assert result.exit_code == 0
        assert "Registered: N" in result.output
        assert "Verified:   N" in result.output

        result = _run(state, "show", SUPPLIER)
        assert result.exit_code == 0
        assert "not found" in result.output
        assert not state.exists()


def test_corrupt_state_exits_with_error():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "state.json"
        state.write_text("[]")

        result = _run(state, "status", SUPPLIER)
        assert result.exit_code == 2
        assert "Cannot read registry state" in result.output


def test_verify_negative_score():
    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "state.json"
        _run(state, "register", "Supplier Corp", "Electronics", "--as", SUPPLIER)

        result = _run(state, "verify", SUPPLIER, "-7", "--as", DEFAULT_ADMIN)
        assert result.exit_code == 0, result.output

        details = RegistryStore(state).load(DEFAULT_ADMIN).get_supplier_details(SUPPLIER)
        assert details.verification_score == -7


def test_json_log_output(monkeypatch):
    monkeypatch.setenv("SUPPLIER_REGISTRY_LOG_JSON", "1")
    monkeypatch.setenv("SUPPLIER_REGISTRY_LOG_LEVEL", "DEBUG")

    with tempfile.TemporaryDirectory() as tmpdir:
        state = Path(tmpdir) / "state.json"
        result = _run(state, "register", "Acme Parts", "Manufacturing", "--as", SUPPLIER)
        assert result.exit_code == 0, result.output

    events = [json.loads(line) for line in result.output.splitlines() if line.startswith("{")]
    registered = [e for e in events if e["event"] == "supplier_registered"]
    assert len(registered) == 1
    assert registered[0]["caller"] == SUPPLIER
    assert registered[0]["height"] == 1
    assert registered[0]["level"] == "info"
