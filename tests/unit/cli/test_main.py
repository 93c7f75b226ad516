"""Unit tests for CLI command handling."""

from __future__ import annotations

import pytest

from cli.main import main
from core.constants import MESSAGE_NAME_REQUIRED, MESSAGE_OPEN_FAILED


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("REACTIONS_BASELINE_LIMIT", raising=False)
    monkeypatch.delenv("REACTIONS_PICKER", raising=False)
    monkeypatch.delenv("REACTIONS_START_DIR", raising=False)


def _write_images(tmp_path, *names: str) -> list[str]:
    source_dir = tmp_path / "sources"
    source_dir.mkdir(exist_ok=True)
    paths = []
    for name in names:
        path = source_dir / name
        path.write_bytes(name.encode("utf-8"))
        paths.append(str(path))
    return paths


def test_cli_create_prints_profile(tmp_path, capsys) -> None:
    """CLI create should make the folder and print the profile name."""
    exit_code = main(["create", "alice", "--parent", str(tmp_path)])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0 and output == ["profile=alice"] and (tmp_path / "alice").is_dir()


def test_cli_add_baseline_keeps_first_three_images(tmp_path, capsys) -> None:
    """CLI add-baseline should store at most three images and list them."""
    (tmp_path / "alice").mkdir()
    files = _write_images(tmp_path, "1.png", "2.png", "3.png", "4.png")

    exit_code = main(["add-baseline", "--profile", str(tmp_path / "alice"), *files])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0 and output[0] == "profile=alice" and sorted(output[1:]) == [
        "1.png\t5\timage/png",
        "2.png\t5\timage/png",
        "3.png\t5\timage/png",
    ]


def test_cli_list_shows_stored_assets(tmp_path, capsys) -> None:
    """CLI list should print one row per stored baseline image."""
    baseline_dir = tmp_path / "alice" / "BaselineImages"
    baseline_dir.mkdir(parents=True)
    (baseline_dir / "a.gif").write_bytes(b"gif")

    exit_code = main(["list", "--profile", str(tmp_path / "alice")])
    output = capsys.readouterr().out.splitlines()

    assert exit_code == 0 and output == ["profile=alice", "a.gif\t3\timage/gif"]


def test_cli_open_missing_folder_reports_generic_error(tmp_path, capsys) -> None:
    """CLI open should print the retry message for unusable folders."""
    exit_code = main(["open", str(tmp_path / "missing")])
    captured = capsys.readouterr()

    assert exit_code == 1 and MESSAGE_OPEN_FAILED in captured.err and captured.out == ""


def test_cli_create_blank_name_is_usage_error(tmp_path, capsys) -> None:
    """CLI create should reject a blank profile name."""
    exit_code = main(["create", "   ", "--parent", str(tmp_path)])
    captured = capsys.readouterr()

    assert exit_code == 2 and MESSAGE_NAME_REQUIRED in captured.err


def test_cli_add_baseline_without_images_fails(tmp_path, capsys) -> None:
    """CLI add-baseline should refuse selections with no images."""
    (tmp_path / "alice").mkdir()
    notes = tmp_path / "notes.txt"
    notes.write_text("not an image", encoding="utf-8")

    exit_code = main(["add-baseline", "--profile", str(tmp_path / "alice"), str(notes)])

    assert exit_code == 1 and "no image files" in capsys.readouterr().err
