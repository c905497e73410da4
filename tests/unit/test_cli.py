"""Unit tests for the command line entry point."""

import json

import pytest

from scripts import ticker_change
from src.calculations.exceptions import MissingResultError, TransportError
from src.data.models.ticker import Ticker


@pytest.fixture
def cli(monkeypatch: pytest.MonkeyPatch, sample_ticker: Ticker) -> list[list[str]]:
    """Patch the batch runner and logging setup; return recorded symbol lists."""
    calls: list[list[str]] = []

    def fake_run(symbols: list[str]) -> list[Ticker]:
        calls.append(symbols)
        return [sample_ticker.model_copy(update={"symbol": s}) for s in symbols]

    monkeypatch.setattr(ticker_change, "run", fake_run)
    monkeypatch.setattr(ticker_change, "setup_logging", lambda *args, **kwargs: None)
    return calls


class TestCli:
    """Tests for main()."""

    def test_text_output(self, cli: list[list[str]], capsys: pytest.CaptureFixture) -> None:
        """Test default text output keeps input order."""
        ticker_change.main(["AAPL", "MSFT"])

        out = capsys.readouterr().out
        assert out == "AAPL 122.87\nMSFT 122.87\n"
        assert cli == [["AAPL", "MSFT"]]

    def test_text_output_with_flags(
        self,
        cli: list[list[str]],
        capsys: pytest.CaptureFixture,
    ) -> None:
        """Test change flags print in fixed order regardless of argument order."""
        ticker_change.main(["AAPL", "--yr", "--dy", "--mo"])

        assert capsys.readouterr().out == "AAPL 122.87 1.562% 22.870% 145.740%\n"

    def test_json_output(self, cli: list[list[str]], capsys: pytest.CaptureFixture) -> None:
        """Test structured output includes every change."""
        ticker_change.main(["--json", "AAPL"])

        data = json.loads(capsys.readouterr().out)
        assert data[0]["symbol"] == "AAPL"
        assert data[0]["mo_change"] == 22.87

    def test_requires_symbol(self, cli: list[list[str]]) -> None:
        """Test at least one symbol is required."""
        with pytest.raises(SystemExit) as exc_info:
            ticker_change.main([])

        assert exc_info.value.code == 2

    @pytest.mark.parametrize("argv", [["  "], ["AAPL", " "], ["", "MSFT"]])
    def test_blank_symbols(
        self,
        cli: list[list[str]],
        capsys: pytest.CaptureFixture,
        argv: list[str],
    ) -> None:
        """Test any blank symbol rejects the whole run without output."""
        with pytest.raises(SystemExit) as exc_info:
            ticker_change.main(argv)

        captured = capsys.readouterr()
        assert exc_info.value.code == 1
        assert captured.err == "Error: ticker symbols must not be blank\n"
        assert captured.out == ""
        assert cli == []

    @pytest.mark.parametrize(
        "error",
        [MissingResultError(), TransportError("AAPL: request failed: connection refused")],
    )
    def test_error_exit(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture,
        error: Exception,
    ) -> None:
        """Test failures print one error line, no data, and exit non-zero."""

        def failing_run(symbols: list[str]) -> list[Ticker]:
            raise error

        monkeypatch.setattr(ticker_change, "run", failing_run)
        monkeypatch.setattr(ticker_change, "setup_logging", lambda *args, **kwargs: None)

        with pytest.raises(SystemExit) as exc_info:
            ticker_change.main(["AAPL"])

        captured = capsys.readouterr()
        assert exc_info.value.code == 1
        assert captured.out == ""
        assert captured.err == f"Error: {error}\n"
