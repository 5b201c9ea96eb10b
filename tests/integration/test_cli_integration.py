import json
import os
import subprocess
import sys
import tempfile
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[2]

def run_cli(*args, cwd=PROJECT_ROOT):
    cmd = [sys.executable, "-m", "reduse.cli.main", *args]
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT), env.get("PYTHONPATH")]))
    return subprocess.run(cmd, capture_output=True, text=True, cwd=cwd, env=env)

def test_cli_walk_runs():
    with tempfile.TemporaryDirectory() as d:
        root = Path(d)
        (root / "x.txt").write_text("x", encoding="utf-8")
        (root / "sub" / "sub2").mkdir(parents=True)
        (root / "sub" / "y.txt").write_text("y", encoding="utf-8")

        result = run_cli(str(root) + "/", "-f", "png", "-i")

        assert result.returncode == 0
        assert "Workspace Directory: " + str(root) in result.stdout
        assert "Format: png" in result.stdout
        assert "Fix Imports: true" in result.stdout
        assert "Files found: 2" in result.stdout

def test_cli_relative_workspace(tmp_path: Path):
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text("<html></html>", encoding="utf-8")

    result = run_cli("site", "--json", cwd=tmp_path)

    assert result.returncode == 0
    report = json.loads(result.stdout)
    assert Path(report["workspace"]).resolve() == site.resolve()
    assert report["total_files"] == 1

def test_cli_empty_workspace(tmp_path: Path):
    result = run_cli(str(tmp_path))
    assert result.returncode == 0
    assert "Files found: 0" in result.stdout

def test_cli_missing_workspace_fails(tmp_path: Path):
    missing = tmp_path / "missing"
    result = run_cli(str(missing))

    assert result.returncode == 1
    assert "No such file or directory" in result.stderr
    assert str(missing) in result.stderr

def test_cli_unknown_flag_prints_usage():
    result = run_cli("-z")
    assert result.returncode == 2
    assert "usage:" in result.stderr

def test_cli_writes_output_file(tmp_path: Path):
    site = tmp_path / "site"
    site.mkdir()
    (site / "style.css").write_text("body {}", encoding="utf-8")
    out = tmp_path / "report.json"

    result = run_cli(str(site), "--json", "--output", str(out))

    assert result.returncode == 0
    assert result.stdout == ""
    assert json.loads(out.read_text(encoding="utf-8"))["recognized_files"] == 1

def test_cli_max_entries_from_environment(tmp_path: Path, monkeypatch):
    (tmp_path / "a.txt").write_text("a", encoding="utf-8")
    (tmp_path / "b.txt").write_text("b", encoding="utf-8")
    monkeypatch.setenv("REDUSE_MAX_ENTRIES", "1")

    result = run_cli(str(tmp_path))

    assert result.returncode == 1
    assert "full" in result.stderr

def test_cli_invalid_environment_is_usage_error(tmp_path: Path, monkeypatch):
    monkeypatch.setenv("REDUSE_INITIAL_CAPACITY", "0")
    result = run_cli(str(tmp_path))
    assert result.returncode == 2
    assert "initial_capacity" in result.stderr
