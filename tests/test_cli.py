"""Tests for the `ccswitch` command line."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from ccswitch.cli import main as cli_module
from ccswitch.cli import providers_cmd
from ccswitch.constant import BACKUP_DIR_NAME
from ccswitch.providers import ValidationResult


@pytest.fixture
def run_cli(tmp_path):
    settings = tmp_path / "claude" / "settings.json"

    def _run(args: list[str], input: str | None = None):
        runner = CliRunner()
        return runner.invoke(
            cli_module.cli,
            [
                "--working-dir",
                str(tmp_path / "ccswitch"),
                "--settings-file",
                str(settings),
                "--claude-config",
                str(tmp_path / "claude.json"),
                *args,
            ],
            input=input,
            env={"LANG": "en_US.UTF-8"},
        )

    _run.settings = settings
    _run.working_dir = tmp_path / "ccswitch"
    return _run


@pytest.fixture
def fake_validation(monkeypatch):
    """Replace network validation with a canned result."""
    calls = []
    result = {"value": ValidationResult(valid=True)}

    def _validate(api_key, provider, region_id, **kwargs):
        calls.append((api_key, provider.id, region_id))
        return result["value"]

    monkeypatch.setattr(providers_cmd, "validate_api_key", _validate)

    def _set(value: ValidationResult):
        result["value"] = value

    _set.calls = calls
    return _set


def _local_config(run_cli) -> dict:
    path = run_cli.working_dir / "config.json"
    return json.loads(path.read_text(encoding="utf-8"))


def test_help_lists_commands(run_cli):
    result = run_cli(["--help"])
    assert result.exit_code == 0
    for name in ("apply", "unload", "status", "backup", "lang", "doctor"):
        assert name in result.output


def test_provider_non_interactive(run_cli):
    result = run_cli(
        ["provider", "--provider", "minimax", "--region", "china"],
    )
    assert result.exit_code == 0, result.output
    assert _local_config(run_cli) == {
        "lang": "en_US",
        "provider": "minimax",
        "region": "china",
        "model": "MiniMax-M2.5",
    }


def test_provider_interactive_picks_default_model(run_cli):
    # 4th provider is kimi; single region; accept recommended model.
    result = run_cli(["provider"], input="4\n\n")
    assert result.exit_code == 0, result.output
    assert "Only one region available" in result.output
    config = _local_config(run_cli)
    assert config["provider"] == "kimi"
    assert config["region"] == "global"
    assert config["model"] == "kimi-k2.5"


def test_provider_unknown_id(run_cli):
    result = run_cli(["provider", "--provider", "acme"])
    assert result.exit_code != 0
    assert "Unknown provider: acme" in result.output


def test_provider_unknown_region(run_cli):
    result = run_cli(["provider", "--provider", "kimi", "--region", "mars"])
    assert result.exit_code != 0
    assert "Unknown region: mars" in result.output


def test_auth_requires_provider(run_cli):
    result = run_cli(["auth", "--api-key", "sk"])
    assert result.exit_code == 1
    assert "select a provider" in result.output


def test_auth_saves_valid_key(run_cli, fake_validation):
    run_cli(["provider", "--provider", "zhipu", "--region", "china"])
    result = run_cli(["auth"], input="zk-123\n")
    assert result.exit_code == 0, result.output
    assert _local_config(run_cli)["api_key"] == "zk-123"
    assert fake_validation.calls == [("zk-123", "zhipu", "china")]


def test_auth_rejects_invalid_key(run_cli, fake_validation):
    fake_validation(
        ValidationResult(valid=False, error="invalid_api_key", message="no"),
    )
    selected = run_cli(
        ["provider", "--provider", "kimi", "--model", "kimi-k2.5"],
    )
    assert selected.exit_code == 0, selected.output
    result = run_cli(["auth", "--api-key", "bad"])
    assert result.exit_code == 1
    assert "API key is invalid or expired." in result.output
    assert "api_key" not in _local_config(run_cli)
    assert fake_validation.calls == [("bad", "kimi", "global")]


def test_auth_network_error_saves_anyway(run_cli, fake_validation):
    fake_validation(
        ValidationResult(
            valid=False,
            error="network_error",
            message="Request timeout (15s)",
        ),
    )
    run_cli(["provider", "--provider", "kimi", "--model", "kimi-k2.5"])
    result = run_cli(["auth", "--api-key", "sk-maybe"])
    assert result.exit_code == 0, result.output
    assert "Request timeout (15s)" in result.output
    assert _local_config(run_cli)["api_key"] == "sk-maybe"


def test_auth_revoke(run_cli):
    run_cli(["provider", "--provider", "kimi", "--model", "kimi-k2.5"])
    run_cli(["auth", "--api-key", "sk", "--skip-validation"])
    assert _local_config(run_cli)["api_key"] == "sk"
    result = run_cli(["auth", "revoke"])
    assert result.exit_code == 0
    assert "api_key" not in _local_config(run_cli)


def test_apply_requires_complete_config(run_cli):
    result = run_cli(["apply"])
    assert result.exit_code == 1
    assert not run_cli.settings.exists()


def test_apply_status_unload_flow(run_cli):
    run_cli(["provider", "--provider", "kimi", "--model", "kimi-k2.5"])
    run_cli(["auth", "--api-key", "sk-test", "--skip-validation"])

    result = run_cli(["apply"])
    assert result.exit_code == 0, result.output
    settings = json.loads(run_cli.settings.read_text(encoding="utf-8"))
    assert settings["env"]["ANTHROPIC_BASE_URL"] == (
        "https://api.moonshot.ai/anthropic"
    )
    assert settings["model"] == "kimi-k2.5"

    status = run_cli(["status", "--json"])
    assert status.exit_code == 0
    payload = json.loads(status.output)
    assert payload["claude_code"]["provider"] == "kimi"
    assert payload["claude_code"]["region"] == "global"
    assert payload["claude_code"]["api_key"] == "sk-****test"
    assert payload["local"]["api_key"] == "sk-****test"

    text_status = run_cli(["status"])
    assert "Kimi / Moonshot" in text_status.output

    unload = run_cli(["unload", "--yes"])
    assert unload.exit_code == 0, unload.output
    assert "removed" in unload.output
    assert json.loads(run_cli.settings.read_text(encoding="utf-8")) == {}


def test_unload_nothing_to_remove(run_cli):
    run_cli.settings.parent.mkdir(parents=True)
    run_cli.settings.write_text('{"theme": "dark"}', encoding="utf-8")
    result = run_cli(["unload", "--yes"])
    assert result.exit_code == 0
    assert "Nothing to remove" in result.output
    assert run_cli.settings.read_text(encoding="utf-8") == '{"theme": "dark"}'


def test_unload_declined(run_cli):
    run_cli.settings.parent.mkdir(parents=True)
    run_cli.settings.write_text('{"model": "opus"}', encoding="utf-8")
    result = run_cli(["unload"], input="n\n")
    assert result.exit_code == 0
    assert run_cli.settings.read_text(encoding="utf-8") == '{"model": "opus"}'


def test_backup_create_list_restore(run_cli):
    run_cli.settings.parent.mkdir(parents=True)
    run_cli.settings.write_text('{"model": "haiku"}', encoding="utf-8")

    assert "No backups found" in run_cli(["backup", "list"]).output
    created = run_cli(["backup", "create"])
    assert created.exit_code == 0
    assert "1 backup(s)" in run_cli(["backup", "list"]).output

    run_cli.settings.write_text('{"model": "opus"}', encoding="utf-8")
    restored = run_cli(["backup", "restore", "--latest"])
    assert restored.exit_code == 0, restored.output
    assert run_cli.settings.read_text(encoding="utf-8") == '{"model": "haiku"}'


def test_backup_restore_interactive(run_cli):
    run_cli.settings.parent.mkdir(parents=True)
    run_cli.settings.write_text('{"a": 1}', encoding="utf-8")
    run_cli(["backup", "create"])
    run_cli.settings.write_text('{"a": 2}', encoding="utf-8")

    result = run_cli(["backup", "restore"], input="1\n")
    assert result.exit_code == 0, result.output
    assert json.loads(run_cli.settings.read_text()) == {"a": 1}


def test_backup_restore_rejects_path_with_latest(run_cli):
    run_cli.settings.parent.mkdir(parents=True)
    run_cli.settings.write_text('{"a": 1}', encoding="utf-8")
    run_cli(["backup", "create"])
    run_cli.settings.write_text('{"a": 2}', encoding="utf-8")
    backup = next((run_cli.working_dir / BACKUP_DIR_NAME).iterdir())

    result = run_cli(["backup", "restore", str(backup), "--latest"])
    assert result.exit_code == 2
    assert "mutually exclusive" in result.output
    assert json.loads(run_cli.settings.read_text()) == {"a": 2}


def test_backups_live_under_working_dir(run_cli):
    run_cli(["backup", "create"])
    backups = list((run_cli.working_dir / BACKUP_DIR_NAME).iterdir())
    assert len(backups) == 1
    assert backups[0].name.startswith("settings-")


def test_backup_restore_missing_file(run_cli, tmp_path):
    result = run_cli(
        ["backup", "restore", str(tmp_path / "settings-missing.json")],
    )
    assert result.exit_code == 1
    assert "Backup file not found" in result.output


def test_backup_restore_invalid_file(run_cli, tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("not json", encoding="utf-8")
    result = run_cli(["backup", "restore", str(bad)])
    assert result.exit_code == 1
    assert "Invalid backup file" in result.output


def test_lang_set_and_show(run_cli):
    result = run_cli(["lang", "set", "de_DE"])
    assert result.exit_code == 0
    assert "Sprache gesetzt: de_DE" in result.output
    assert _local_config(run_cli)["lang"] == "de_DE"

    shown = run_cli(["lang", "show"])
    assert "Aktuell: de_DE" in shown.output


def test_lang_set_unknown(run_cli):
    result = run_cli(["lang", "set", "xx_XX"])
    assert result.exit_code == 1
    assert "Unknown locale: xx_XX" in result.output


def test_doctor_without_network(run_cli):
    result = run_cli(["doctor", "--skip-network"])
    assert result.exit_code == 0
    assert "Python version" in result.output
    assert "Some checks failed" in result.output


def test_no_subcommand_opens_menu_after_setup(run_cli):
    run_cli(["lang", "set", "en_US"])
    # 7) Show status, then 8) Exit.
    result = run_cli([], input="7\n8\n")
    assert result.exit_code == 0, result.output
    assert "What would you like to do?" in result.output
    assert "Local Config" in result.output
    assert "Goodbye!" in result.output


def test_menu_applies_selected_provider(run_cli):
    run_cli(["provider", "--provider", "kimi", "--model", "kimi-k2.5"])
    run_cli(["auth", "--api-key", "sk-menu", "--skip-validation"])

    result = run_cli([], input="4\n8\n")
    assert result.exit_code == 0, result.output
    settings = json.loads(run_cli.settings.read_text(encoding="utf-8"))
    assert settings["env"]["ANTHROPIC_AUTH_TOKEN"] == "sk-menu"
    assert "Active (Kimi / Moonshot)" in result.output


def test_menu_language_switch_relabels_menu(run_cli):
    run_cli(["lang", "set", "en_US"])
    result = run_cli([], input="1\n2\n8\n")
    assert result.exit_code == 0, result.output
    assert _local_config(run_cli)["lang"] == "de_DE"
    assert "Was möchtest du tun?" in result.output
    assert "Auf Wiedersehen!" in result.output


def test_menu_unload_nothing_to_remove(run_cli):
    run_cli(["lang", "set", "en_US"])
    result = run_cli([], input="5\ny\n8\n")
    assert result.exit_code == 0, result.output
    assert "Nothing to remove" in result.output


def test_menu_keeps_running_after_command_error(run_cli):
    run_cli.working_dir.mkdir(parents=True)
    (run_cli.working_dir / "config.json").write_text(
        '{"lang": "en_US", "provider": "acme"}',
        encoding="utf-8",
    )
    result = run_cli([], input="3\n8\n")
    assert result.exit_code == 0, result.output
    assert "Unknown provider: acme" in result.output
    assert "Goodbye!" in result.output


def test_config_write_failure_is_reported(run_cli):
    (run_cli.working_dir / "config.json").mkdir(parents=True)
    result = run_cli(
        ["provider", "--provider", "kimi", "--model", "kimi-k2.5"],
    )
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Failed to write" in result.output


def test_lang_set_write_failure_is_reported(run_cli):
    (run_cli.working_dir / "config.json").mkdir(parents=True)
    result = run_cli(["lang", "set", "de_DE"])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
    assert "Failed to write" in result.output


def test_init_runs_full_setup(run_cli, fake_validation):
    # language 1 (English), provider 2 (zhipu), region 1 (global), key.
    result = run_cli(["init"], input="1\n2\n1\nzk-init\n")
    assert result.exit_code == 0, result.output
    config = _local_config(run_cli)
    assert config["provider"] == "zhipu"
    assert config["api_key"] == "zk-init"
    settings = json.loads(run_cli.settings.read_text(encoding="utf-8"))
    assert settings["env"]["ANTHROPIC_BASE_URL"] == (
        "https://api.z.ai/api/anthropic"
    )
