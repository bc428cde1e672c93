"""
Tests for the command line entry point.
"""

import pytest

from slideshow_toolkit.arranger import OddVerticalPolicy
from slideshow_toolkit.cli import build_parser, config_from_args, main


class TestConfigFromArgs:
    """Tests for argument parsing into RunConfig."""

    def test_defaults_then_standard_run(self):
        config = config_from_args(build_parser().parse_args([]))
        assert config.inputs == ("a", "b", "c", "d", "e")
        assert config.engine.workers == 1
        assert config.engine.deterministic_ties
        assert config.engine.odd_vertical_policy is OddVerticalPolicy.DROP
        assert not config.keep_going
        assert config.write_reports

    def test_options_then_mapped_to_config(self, tmp_path):
        args = build_parser().parse_args([
            "b", "c",
            "--input-dir", str(tmp_path),
            "--workers", "4",
            "--input-workers", "2",
            "--odd-vertical", "single",
            "--positional-ties",
            "--keep-going",
            "--no-reports",
        ])
        config = config_from_args(args)
        assert config.inputs == ("b", "c")
        assert config.input_dir == tmp_path
        assert config.engine.workers == 4
        assert not config.engine.deterministic_ties
        assert config.engine.odd_vertical_policy is OddVerticalPolicy.SINGLE
        assert config.input_workers == 2
        assert config.keep_going
        assert not config.write_reports


class TestMain:
    """Tests for main()."""

    def test_main_when_example_then_exit_zero_and_output(self, input_dir, tmp_path, caplog):
        out = tmp_path / "out"
        code = main(["a", "--input-dir", str(input_dir), "--output-dir", str(out)])
        assert code == 0
        assert (out / "output_a.txt").read_text() == "3\n0\n3\n1 2\n"
        assert "Total score: 2" in caplog.text

    def test_main_when_missing_input_then_exit_one(self, input_dir, tmp_path):
        code = main(["zzz", "--input-dir", str(input_dir), "--output-dir", str(tmp_path)])
        assert code == 1

    def test_main_when_keep_going_with_failure_then_exit_one_with_output(self, input_dir, tmp_path):
        code = main(["zzz", "a", "--keep-going", "--input-dir", str(input_dir), "--output-dir", str(tmp_path)])
        assert code == 1
        assert (tmp_path / "output_a.txt").exists()

    def test_main_when_invalid_workers_then_usage_error(self, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["a", "--workers", "0", "--input-dir", str(tmp_path)])
        assert exc_info.value.code == 2

    def test_main_when_verbose_then_timing_summary_logged(self, input_dir, tmp_path, caplog):
        code = main(["a", "-v", "--input-dir", str(input_dir), "--output-dir", str(tmp_path)])
        assert code == 0
        assert "=== Arrangement Timing Summary ===" in caplog.text
        assert "Slowest phases:" in caplog.text

    def test_main_when_names_share_output_file_then_usage_error(self, input_dir, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["a", "a.txt", "--input-dir", str(input_dir), "--output-dir", str(tmp_path)])
        assert exc_info.value.code == 2
