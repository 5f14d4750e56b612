"""Tests for configuration validation and the console demo."""

import io

import pytest

from catalogtree import ConfigurationError
from catalogtree import cli
from catalogtree.config import CatalogConfig, DemoConfig, DemoSection, DisplayConfig
from catalogtree.samples import build_diner_menu, build_table_games_catalog


class TestConfigValidation:

    def test_defaults_are_valid(self):
        assert DemoConfig().validate() == []
        assert DemoConfig().ensure_valid() is not None

    def test_collects_all_errors(self):
        config = DemoConfig(
            sections=set(),
            display=DisplayConfig(indent="--"),
            catalogs=CatalogConfig(diner_capacity=0, high_rtp_threshold=150.0),
        )
        errors = config.validate()
        assert "at least one demo section is required" in errors
        assert "indent must contain only whitespace" in errors
        assert "diner_capacity must be positive" in errors
        assert "high_rtp_threshold must be between 0 and 100" in errors

    def test_ensure_valid_raises(self):
        with pytest.raises(ConfigurationError):
            DemoConfig(verbosity=-1).ensure_valid()

    def test_wants(self):
        config = DemoConfig(sections={DemoSection.CASINO})
        assert config.wants(DemoSection.CASINO)
        assert not config.wants(DemoSection.ITERATOR)
        assert DemoConfig().wants(DemoSection.ITERATOR)

    def test_catalog_config_sizes_samples(self):
        config = CatalogConfig(diner_capacity=2, table_capacity=3)
        diner = build_diner_menu(config)
        assert len(diner) == 2
        assert diner.is_full()
        assert len(build_table_games_catalog(config)) == 3


class TestDemo:

    def test_run_all_sections(self):
        out = io.StringIO()
        cli.run_demo(DemoConfig(), out)
        text = out.getvalue()
        assert "PART 1: ITERATOR PATTERN" in text
        assert "PART 2: COMPOSITE PATTERN" in text
        assert "PART 3: CASINO CATALOGS" in text
        assert "VEGETARIAN MENU" in text
        assert "HIGH RTP GAMES (>97%)" in text

    def test_run_single_section(self):
        out = io.StringIO()
        cli.run_demo(DemoConfig(sections={DemoSection.ITERATOR}), out)
        text = out.getvalue()
        assert "PANCAKE HOUSE MENU (growable list):" in text
        assert "PART 2" not in text

    def test_keyed_catalog_listed_by_rtp(self):
        out = io.StringIO()
        cli.run_demo(DemoConfig(sections={DemoSection.CASINO}), out)
        lines = out.getvalue().splitlines()
        start = lines.index("GAME CATALOG (keyed map, ranked by RTP):")
        assert lines[start + 1].startswith("  Blackjack - RTP: 99.28%")
        assert lines[start + 2].startswith("  Baccarat - RTP: 98.94%")

    def test_invalid_config_rejected(self):
        with pytest.raises(ConfigurationError):
            cli.run_demo(DemoConfig(sections=set()), io.StringIO())


class TestMain:

    @pytest.fixture(autouse=True)
    def _no_logging_setup(self, monkeypatch):
        monkeypatch.setattr(cli, "configure_logging", lambda verbosity: None)

    def test_main_runs_selected_section(self, capsys):
        assert cli.main(["--section", "composite", "--no-descriptions"]) == 0
        out = capsys.readouterr().out
        assert "COMPLETE MENU STRUCTURE:" in out
        assert "  Waffles(v), $3.59" in out.splitlines()
        assert "PART 1" not in out

    def test_main_threshold(self, capsys):
        assert cli.main(["--section", "casino", "--threshold", "99"]) == 0
        out = capsys.readouterr().out
        assert "HIGH RTP GAMES (>99%)" in out

    def test_main_rejects_bad_threshold(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--threshold", "120"])
        assert exc_info.value.code == 2

    def test_main_rejects_unknown_section(self):
        with pytest.raises(SystemExit):
            cli.main(["--section", "bogus"])
