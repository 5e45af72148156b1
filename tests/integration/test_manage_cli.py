"""Smoke tests for the management CLI over the bundled catalogue."""

import sys

import pytest
import structlog

import manage


@pytest.fixture
def run(monkeypatch, capsys):
    def _run(*argv):
        monkeypatch.setattr(sys, "argv", ["manage.py", *argv])
        try:
            manage.main()
        finally:
            structlog.reset_defaults()
        return capsys.readouterr().out

    return _run


class TestManageCli:
    def test_list_sorted_by_price(self, run):
        out = run("list", "--sort", "selling_price", "--desc")
        lines = out.splitlines()
        assert lines[1].startswith("beer2")
        assert "Summer Ale" in out

    def test_low_stock(self, run):
        out = run("low-stock")
        assert "beer4" in out
        assert "beer1" not in out

    def test_history_shows_batch_comparison(self, run):
        out = run("history", "beer1")
        assert "Craft Beer Co." in out
        assert "+₱0.25 (+7.8%)" in out

    def test_export_to_stdout(self, run):
        out = run("export", "beer2")
        assert out.splitlines()[0].startswith('"date","quantity"')
        assert len(out.splitlines()) == 2

    def test_export_to_directory(self, run, tmp_path):
        out = run("export", "beer1", "--output", str(tmp_path))
        assert "Wrote 1 rows" in out
        assert (tmp_path / "premium-lager-supply-history.csv").exists()

    def test_unknown_item_exits(self, run):
        with pytest.raises(SystemExit) as exc_info:
            run("history", "nope")
        assert exc_info.value.code == 1

    def test_orders_newest_first(self, run):
        out = run("orders")
        lines = out.splitlines()
        assert lines[1].startswith("order1")
        assert lines[3].startswith("order3")
        assert "3 orders, ₱519.50 total" in out

    def test_orders_by_status(self, run):
        out = run("orders", "--status", "processing")
        assert "Craft IPA" in out
        assert "Premium Lager" not in out
        assert "1 orders, ₱174.00 total" in out
