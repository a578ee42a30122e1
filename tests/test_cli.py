"""Tests for the command-line interface."""

import json
import logging

import pytest

from xfwall.cli import main, parse_workspace
from xfwall.exceptions import TransportError, XfconfCommandNotFoundError, XfconfTimeoutError

from conftest import image_property


@pytest.fixture
def run_cli(monkeypatch, fake_transport, tmp_path):
    """Run main() against the fake transport with no user config."""
    monkeypatch.setattr("xfwall.xfconf.client.XfconfTransport", lambda config: fake_transport)
    config_file = tmp_path / "no-config.toml"

    def run(*argv):
        return main(["--config", str(config_file), "--seed", "1", *argv])

    return run


def test_query_is_read_only(run_cli, fake_transport, capsys):
    assert run_cli("-q") == 0

    out = capsys.readouterr().out
    assert "Could not get list" in out
    assert " DP-1 : Mode = separate" in out
    assert "\tworkspace 1 : /usr/share/backgrounds/default.png" in out
    assert "Single backdrop mode = false" in out
    assert fake_transport.writes == []


def test_query_json(run_cli, capsys):
    assert run_cli("-q", "--json") == 0

    report = json.loads(capsys.readouterr().out)
    assert list(report["monitors"]) == ["DP-1", "HDMI-1"]
    assert report["workspace_count"] == 2
    assert report["single_mode"] is False


def test_query_marks_single_workspace(run_cli, fake_transport, capsys):
    fake_transport.properties["/backdrop/single-workspace-mode"] = "true"
    fake_transport.properties["/backdrop/single-workspace-number"] = "1"

    assert run_cli("-q") == 0

    out = capsys.readouterr().out
    assert "\tworkspace 1*: " in out
    assert "Single backdrop mode workspace = 1" in out


def test_explicit_images(run_cli, fake_transport):
    assert run_cli("a.jpg::b.jpg:") == 0

    assert fake_transport.properties[image_property("DP-1", 0)] == "a.jpg"
    assert fake_transport.properties[image_property("HDMI-1", 0)] == "b.jpg"
    assert len(fake_transport.writes) == 2


def test_explicit_images_joined_and_repeated(run_cli, fake_transport):
    assert run_cli("-r", "a.jpg", "b.jpg") == 0

    assert [value for _, value in fake_transport.writes] == ["a.jpg", "b.jpg", "a.jpg", "b.jpg"]


def test_partial_failure_exit_code(run_cli, fake_transport, capsys):
    fake_transport.failing_writes.add(image_property("DP-1", 0))

    assert run_cli("a.jpg:b.jpg") == 1

    captured = capsys.readouterr()
    assert "Failed monitorDP-1, workspace-0" in captured.out
    assert "1 of 2 backdrop(s) could not be set" in captured.err


def test_set_list_and_cycle(run_cli, fake_transport, list_file, image_files):
    assert run_cli("-l", str(list_file), "-c") == 0

    assert fake_transport.properties["/backdrop/screen0/monitor0/image-path"] == str(list_file.resolve())
    written = [value for path, value in fake_transport.writes if path.endswith("/last-image")]
    assert len(written) == 4
    assert set(written) <= set(image_files)


def test_set_list_without_cycle_prints_hint(run_cli, fake_transport, list_file, capsys):
    assert run_cli("-l", str(list_file)) == 0

    assert "Use -c to force a backdrop cycle." in capsys.readouterr().out
    assert not any(path.endswith("/last-image") for path, _ in fake_transport.writes)


def test_set_list_without_valid_image(run_cli, fake_transport, tmp_path):
    list_path = tmp_path / "stale.list"
    list_path.write_text("# nothing here exists\n/gone/a.jpg\n")

    assert run_cli("-l", str(list_path)) == 65
    assert fake_transport.writes == []


def test_set_missing_list(run_cli, tmp_path):
    assert run_cli("-l", str(tmp_path / "missing.list")) == 66


def test_rotate_without_saved_list(run_cli):
    assert run_cli() == 66


def test_rotate_from_saved_list(run_cli, fake_transport, list_file):
    fake_transport.properties["/backdrop/screen0/monitor0/image-path"] = str(list_file)

    assert run_cli() == 0
    assert len(fake_transport.writes) == 4


def test_single_mode_with_cycle(run_cli, fake_transport, list_file):
    fake_transport.properties["/backdrop/screen0/monitor0/image-path"] = str(list_file)

    assert run_cli("-s", "1", "-c") == 0

    assert fake_transport.properties["/backdrop/single-workspace-mode"] == "true"
    assert fake_transport.properties["/backdrop/single-workspace-number"] == "1"
    written = [path for path, _ in fake_transport.writes if path.endswith("/last-image")]
    assert written == [image_property("DP-1", 1), image_property("HDMI-1", 1)]


def test_single_mode_index_out_of_range(run_cli, fake_transport, capsys):
    assert run_cli("-s", "7") == 0

    assert "outside valid range" in capsys.readouterr().out
    assert fake_transport.writes == [("/backdrop/single-workspace-mode", True)]


def test_multiple_mode(run_cli, fake_transport):
    fake_transport.properties["/backdrop/single-workspace-mode"] = "true"

    assert run_cli("-m") == 0
    assert fake_transport.properties["/backdrop/single-workspace-mode"] == "false"


def test_single_and_multiple_conflict(run_cli, fake_transport):
    assert run_cli("-s", "-m") == 64
    assert fake_transport.writes == []


def test_bad_workspace_index(run_cli, capsys):
    assert run_cli("-s", "second") == 64
    assert "Bad workspace index specified : 'second'" in capsys.readouterr().err


def test_no_topology(run_cli, fake_transport):
    fake_transport.properties.clear()

    assert run_cli("-q") == 69


def test_parse_workspace():
    assert parse_workspace("") is None
    assert parse_workspace("2") == 2
    with pytest.raises(ValueError):
        parse_workspace("-1")


def test_query_reports_unreadable_slot(run_cli, fake_transport, capsys):
    fake_transport.failing_reads.add(image_property("HDMI-1", 1))

    assert run_cli("-q") == 0

    out = capsys.readouterr().out
    assert "\tworkspace 1 : <unavailable: Timeout reading" in out
    assert "\tworkspace 0 : /usr/share/backgrounds/default.png" in out
    assert "Single backdrop mode = false" in out


def test_json_requires_query(run_cli, fake_transport, capsys):
    assert run_cli("--json") == 64

    assert "--json is only valid together with -q" in capsys.readouterr().err
    assert fake_transport.writes == []


def test_xfconf_timeout_exit_code(run_cli, fake_transport, monkeypatch, capsys):
    def timed_out(channel, prefix):
        raise XfconfTimeoutError("Timeout after 2s: xfconf-query -c xfce4-desktop -l")

    monkeypatch.setattr(fake_transport, "list_properties", timed_out)

    assert run_cli("-q") == 75
    assert "Configuration Service Timeout" in capsys.readouterr().err


def test_transport_failure_aborts_run(run_cli, fake_transport, monkeypatch, capsys):
    def failed(channel, prefix):
        raise TransportError("Command failed with exit code 1: xfconf-query")

    monkeypatch.setattr(fake_transport, "list_properties", failed)

    assert run_cli() == 69
    assert "Configuration Service Error" in capsys.readouterr().err
    assert fake_transport.writes == []


def test_invalid_config_value_exit_code(run_cli, fake_transport, tmp_path, capsys):
    config_file = tmp_path / "config.toml"
    config_file.write_text("[xfconf]\ntimeout = 0\n")

    assert run_cli("--config", str(config_file), "-q") == 78
    assert "Configuration Validation Error" in capsys.readouterr().err


def test_unknown_config_section_exit_code(run_cli, fake_transport, tmp_path, capsys):
    config_file = tmp_path / "config.toml"
    config_file.write_text("[schedule]\nlatitude = 52.0\n")

    assert run_cli("--config", str(config_file)) == 78
    assert "Unknown config section 'schedule'" in capsys.readouterr().err
    assert fake_transport.writes == []


def test_set_list_logs_validation(run_cli, list_file, caplog):
    caplog.set_level(logging.DEBUG, logger="xfwall.commands.settings")

    assert run_cli("-l", str(list_file)) == 0

    assert any("validated" in record.getMessage() for record in caplog.records)


def test_missing_xfconf_query_exit_code(run_cli, fake_transport, monkeypatch, capsys):
    def not_installed(channel, prefix):
        raise XfconfCommandNotFoundError("Command not found: xfconf-query")

    monkeypatch.setattr(fake_transport, "list_properties", not_installed)

    assert run_cli("-q") == 69
    assert "xfconf-query Not Found" in capsys.readouterr().err
