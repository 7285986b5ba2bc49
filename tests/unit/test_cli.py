"""Unit tests for the command-line interface."""

import logging

import pytest

from watorsim import cli
from watorsim.core import ConfigError
from watorsim.stats import read_stats


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self):
        args = cli.build_parser().parse_args([])
        world_config, run_config = cli.configs_from_args(args)

        assert (world_config.num_fish, world_config.num_shark) == (200, 100)
        assert (world_config.fish_breed, world_config.shark_breed, world_config.starve) == (3, 5, 3)
        assert world_config.grid_size == 20
        assert world_config.workers == 1
        assert (run_config.steps, run_config.print_every) == (200, 20)
        assert run_config.csv_path is None
        assert not run_config.graphics

    def test_all_flags(self):
        args = cli.build_parser().parse_args([
            "--num-shark", "5", "--num-fish", "7", "--fish-breed", "2",
            "--shark-breed", "4", "--starve", "6", "--grid-size", "9",
            "--threads", "3", "--steps", "11", "--print-every", "0",
            "--csv", "out.csv", "--graphics", "--seed", "13",
        ])
        world_config, run_config = cli.configs_from_args(args)

        assert world_config.num_shark == 5
        assert world_config.num_fish == 7
        assert world_config.starve == 6
        assert world_config.workers == 3
        assert run_config.steps == 11
        assert run_config.csv_path == "out.csv"
        assert run_config.graphics
        assert run_config.seed == 13

    def test_invalid_values_rejected(self):
        args = cli.build_parser().parse_args(["--grid-size", "2", "--num-fish", "4", "--num-shark", "1"])
        with pytest.raises(ConfigError):
            cli.configs_from_args(args)

    def test_non_integer_flag(self):
        with pytest.raises(SystemExit):
            cli.build_parser().parse_args(["--steps", "many"])


class TestMain:
    """Tests for main()."""

    def test_text_run_writes_csv(self, tmp_path, capsys):
        path = tmp_path / "stats.csv"
        code = cli.main([
            "--grid-size", "6", "--num-fish", "10", "--num-shark", "3",
            "--steps", "4", "--print-every", "2", "--csv", str(path), "--seed", "1",
        ])

        assert code == 0
        assert len(read_stats(path)) == 4
        assert "Fish=10  Sharks=3" in capsys.readouterr().out

    def test_config_error_exit_code(self, caplog):
        with caplog.at_level(logging.ERROR):
            code = cli.main(["--grid-size", "3", "--num-fish", "9", "--num-shark", "1"])

        assert code == 1
        assert "More creatures than cells" in caplog.text

    def test_zero_steps_rejected(self):
        assert cli.main(["--steps", "0"]) == 1
