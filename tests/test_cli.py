"""Tests for the scan-hooks command line."""

import json

import pytest

from hookscanner.cli import DEFAULT_SNAPSHOT, SNAPSHOT_ENV_VAR, _resolve_snapshot_path, build_arg_parser, main


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(SNAPSHOT_ENV_VAR, raising=False)


class TestArguments:
    """Test argument parsing and configuration defaults."""

    def test_defaults(self):
        args = build_arg_parser().parse_args([])
        assert args.directory == "src"
        assert args.snapshot is None
        assert args.ext == "php"
        assert not (args.json or args.update or args.check or args.no_color)

    def test_snapshot_equals_syntax(self):
        args = build_arg_parser().parse_args(["lib", "--snapshot=hooks.json"])
        assert args.directory == "lib"
        assert args.snapshot == "hooks.json"

    def test_snapshot_path_resolution(self, monkeypatch):
        assert _resolve_snapshot_path(None) == DEFAULT_SNAPSHOT
        monkeypatch.setenv(SNAPSHOT_ENV_VAR, "ci/hooks.json")
        assert _resolve_snapshot_path(None) == "ci/hooks.json"
        assert _resolve_snapshot_path("explicit.json") == "explicit.json"

    def test_help(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--help"])
        assert exc.value.code == 0
        out = capsys.readouterr().out
        assert "WP Hook Scanner" in out
        assert "--json" in out
        assert "--snapshot" in out

    @pytest.mark.parametrize("flag", ["--version", "-v"])
    def test_version(self, capsys, flag):
        with pytest.raises(SystemExit) as exc:
            main([flag])
        assert exc.value.code == 0
        assert "WP Hook Scanner v1.0.0" in capsys.readouterr().out


class TestRun:
    """Test the scan modes end to end."""

    def test_pretty_print(self, capsys, fixtures_dir):
        assert main([str(fixtures_dir), "--no-color"]) == 0
        out = capsys.readouterr().out
        assert "Hook Scanner" in out
        assert "Summary: 11 unique hooks found" in out
        assert "\x1b[" not in out

    def test_json(self, capsys, fixtures_dir):
        assert main([str(fixtures_dir), "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert set(data) == {"registered", "fired", "registered-filter", "applied-filter"}
        assert len(data["registered"]["init"]) == 2

    def test_empty_directory(self, capsys, tmp_path):
        assert main([str(tmp_path), "--no-color"]) == 0
        assert "0 unique hooks found" in capsys.readouterr().out

    def test_missing_directory(self, capsys):
        assert main(["/nonexistent/dir", "--no-color"]) == 1
        captured = capsys.readouterr()
        assert "Directory not found" in captured.err
        assert captured.out == ""

    def test_custom_extension(self, capsys, tmp_path):
        (tmp_path / "hooks.inc").write_text("<?php do_action('from_inc');")
        assert main([str(tmp_path), "--ext", "inc", "--json"]) == 0
        assert "from_inc" in json.loads(capsys.readouterr().out)["fired"]


class TestSnapshotModes:
    """Test --update and --check."""

    def test_update(self, capsys, fixtures_dir, tmp_path):
        path = tmp_path / "test-snapshot.json"
        assert main([str(fixtures_dir), "--update", f"--snapshot={path}"]) == 0
        assert "Snapshot saved" in capsys.readouterr().out
        assert json.loads(path.read_text())["registered"] == ["admin_init", "init", "wp_enqueue_scripts", "wp_loaded"]

    def test_update_uses_env_path(self, capsys, fixtures_dir, tmp_path, monkeypatch):
        path = tmp_path / "env-snapshot.json"
        monkeypatch.setenv(SNAPSHOT_ENV_VAR, str(path))
        assert main([str(fixtures_dir), "--update"]) == 0
        assert path.exists()

    def test_update_failure(self, capsys, fixtures_dir, tmp_path):
        path = tmp_path / "no-such-dir" / "snap.json"
        assert main([str(fixtures_dir), "--update", f"--snapshot={path}"]) == 1
        assert "Failed to save snapshot" in capsys.readouterr().err

    def test_check_matching(self, capsys, fixtures_dir, tmp_path):
        path = tmp_path / "test-snapshot.json"
        main([str(fixtures_dir), "--update", f"--snapshot={path}"])
        capsys.readouterr()

        assert main([str(fixtures_dir), "--check", f"--snapshot={path}", "--no-color"]) == 0
        assert "match snapshot" in capsys.readouterr().out

    def test_check_mismatch(self, capsys, fixtures_dir, tmp_path):
        path = tmp_path / "old.json"
        path.write_text(json.dumps({"registered": ["init", "ghost_hook"]}))

        assert main([str(fixtures_dir), "--check", f"--snapshot={path}", "--no-color"]) == 1
        out = capsys.readouterr().out
        assert "Hook snapshot mismatch" in out
        assert "- ghost_hook" in out
        assert "+ wp_loaded" in out

    def test_check_malformed_snapshot_values(self, capsys, fixtures_dir, tmp_path):
        path = tmp_path / "odd.json"
        path.write_text(json.dumps({"registered": 5, "fired": "my_plugin_loaded"}))

        assert main([str(fixtures_dir), "--check", f"--snapshot={path}", "--no-color"]) == 1
        out = capsys.readouterr().out
        assert "Hook snapshot mismatch" in out
        assert "+ init" in out
        assert "+ my_plugin_loaded" in out

    def test_check_missing_snapshot(self, capsys, fixtures_dir, tmp_path):
        path = tmp_path / "nonexistent-snapshot.json"
        assert main([str(fixtures_dir), "--check", f"--snapshot={path}"]) == 1
        err = capsys.readouterr().err
        assert "No snapshot found" in err
        assert "--update" in err

    def test_json_takes_precedence(self, capsys, fixtures_dir, tmp_path):
        path = tmp_path / "snap.json"
        assert main([str(fixtures_dir), "--json", "--update", f"--snapshot={path}"]) == 0
        assert not path.exists()
        json.loads(capsys.readouterr().out)
