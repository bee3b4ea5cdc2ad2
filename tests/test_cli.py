"""
Tests for the storage-ls command line.
"""

import pytest

from storage_ls.cli import main


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("STORAGE_LS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("STORAGE_LS_CONFIG", raising=False)


def _write_config(tmp_path, body):
    path = tmp_path / "disks.yaml"
    path.write_text(body, encoding="utf-8")
    return str(path)


class TestCli:
    """Test cases for the CLI entry point."""

    def test_no_arguments_shows_disk_table(self, disk_config_file, capsys):
        code = main(["-c", disk_config_file])

        out = capsys.readouterr().out
        assert code == 0
        assert "Available disks:" in out
        assert "local [*]" in out
        assert "scratch" in out
        assert "memory" in out

    def test_no_disks_configured(self, tmp_path, capsys):
        config = _write_config(tmp_path, "filesystems:\n  disks: null\n")

        code = main(["-c", config, "-d", "local", "/"])

        captured = capsys.readouterr()
        assert code == 1
        assert "No disks defined on this system" in captured.err
        assert captured.out == ""

    def test_missing_config_file(self, tmp_path, capsys):
        code = main(["-c", str(tmp_path / "absent.yaml")])

        assert code == 1
        assert "No disks defined on this system" in capsys.readouterr().err

    def test_invalid_disk_falls_back_to_table(self, disk_config_file, capsys):
        code = main(["-c", disk_config_file, "--disk", "s3"])

        captured = capsys.readouterr()
        assert code == 0
        assert 'Selected disk "s3" does not exist' in captured.err
        assert "Available disks:" in captured.out

    def test_short_listing_on_default_disk(self, disk_config_file, capsys):
        code = main(["-c", disk_config_file, "/"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == [
            "empty.txt",
            "subdir",
            "test1.txt",
        ]

    def test_shorthand_recursive_listing(self, disk_config_file, capsys):
        code = main(["-c", disk_config_file, "--no-color", "-R", "scratch:/"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == [
            "/:",
            "notes.txt",
            "logs",
            "",
            "logs:",
            "app.log",
        ]

    def test_long_listing(self, disk_config_file, capsys):
        code = main(["-c", disk_config_file, "-d", "local", "-l"])

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert lines[0].startswith("- " + "0".rjust(10) + " ")
        assert lines[0].endswith(" empty.txt")
        assert lines[1].startswith("d ")
        assert lines[1].endswith(" subdir")
        assert lines[2] == "- " + "20".rjust(10) + " 2023-11-14 22:13:20 test1.txt"

    def test_empty_root(self, tmp_path, capsys):
        config = _write_config(
            tmp_path,
            "filesystems:\n  disks:\n    scratch:\n      driver: memory\n",
        )

        code = main(["-c", config, "-d", "scratch"])

        assert code == 0
        assert capsys.readouterr().out == ""

    def test_missing_directory_reports_error(self, disk_config_file, capsys):
        code = main(["-c", disk_config_file, "-d", "local", "/nope"])

        captured = capsys.readouterr()
        assert code == 1
        assert "Cannot list local:/nope" in captured.err
        assert captured.out == ""

    def test_unknown_driver(self, tmp_path, capsys):
        config = _write_config(
            tmp_path,
            "filesystems:\n  disks:\n    cloud:\n      driver: s3\n",
        )

        code = main(["-c", config, "cloud:/"])

        assert code == 1
        assert 'unsupported driver "s3"' in capsys.readouterr().err

    def test_bad_log_level(self, disk_config_file, monkeypatch, capsys):
        monkeypatch.setenv("STORAGE_LS_LOG_LEVEL", "LOUD")

        code = main(["-c", disk_config_file])

        assert code == 1
        assert "Unknown log level: LOUD" in capsys.readouterr().err

    def test_memory_directory_written_as_null(self, tmp_path, capsys):
        config = _write_config(
            tmp_path,
            "filesystems:\n  disks:\n    s:\n      driver: memory\n"
            "      tree:\n        logs:\n",
        )

        code = main(["-c", config, "-d", "s"])

        assert code == 0
        assert capsys.readouterr().out.splitlines() == ["logs"]

    def test_memory_tree_with_bad_size(self, tmp_path, capsys):
        config = _write_config(
            tmp_path,
            "filesystems:\n  disks:\n    s:\n      driver: memory\n"
            "      tree:\n        a.txt: big\n",
        )

        code = main(["-c", config, "-d", "s"])

        captured = capsys.readouterr()
        assert code == 1
        assert 'Disk "s" tree is invalid' in captured.err
        assert captured.out == ""
