"""
Tests for progress reporting module.
"""

import io
import sys
from unittest.mock import MagicMock, patch

from tout.progress import (
    PrintReporter,
    SearchCancelled,
    SweepProgress,
    TqdmReporter,
    resolve_reporter,
)


class TestSearchCancelled:
    """Test SearchCancelled exception."""

    def test_is_exception(self):
        assert issubclass(SearchCancelled, Exception)

    def test_message(self):
        exc = SearchCancelled("cancelled by user")
        assert str(exc) == "cancelled by user"


class TestSweepProgress:
    """Test SweepProgress forwarding of visited sample sizes."""

    def test_start_fires_zero(self):
        cb = MagicMock()
        SweepProgress(193, cb).start()
        cb.assert_called_once_with(0, 193)

    def test_every_visit_forwarded(self):
        cb = MagicMock()
        progress = SweepProgress(193, cb)
        for n in (1, 2, 3):
            progress.visit(n)
        assert [c.args for c in cb.call_args_list] == [(1, 193), (2, 193), (3, 193)]
        assert progress.last_n == 3

    def test_early_stop_not_padded(self):
        cb = MagicMock()
        progress = SweepProgress(193, cb)
        progress.start()
        for n in range(1, 31):
            progress.visit(n)
        progress.finish()
        cb.assert_called_with(30, 193)
        cb.close.assert_called_once_with(30)

    def test_finish_without_close(self):
        calls = []
        progress = SweepProgress(5, lambda n, max_n: calls.append((n, max_n)))
        progress.visit(2)
        progress.finish()
        assert calls == [(2, 5)]

    def test_finish_before_any_visit(self):
        cb = MagicMock()
        progress = SweepProgress(5, cb)
        progress.start()
        progress.finish()
        cb.close.assert_called_once_with(0)


class TestPrintReporter:
    """Test console reporter."""

    def test_writes_current_size(self):
        buf = io.StringIO()
        with patch.object(sys, "stderr", buf):
            PrintReporter()(24, 193)
        assert "n = 24 of max_n = 193" in buf.getvalue()
        assert not buf.getvalue().endswith("\n")

    def test_close_reports_stop(self):
        buf = io.StringIO()
        with patch.object(sys, "stderr", buf):
            PrintReporter().close(42)
        assert "stopped at n = 42" in buf.getvalue()
        assert buf.getvalue().endswith("\n")


class TestTqdmReporter:
    """Test tqdm reporter with a mocked tqdm module."""

    def test_updates_to_stop_and_closes(self):
        bar = MagicMock()
        bar.n = 0
        tqdm_mod = MagicMock()
        tqdm_mod.tqdm.return_value = bar

        with patch.dict(sys.modules, {"tqdm": tqdm_mod}):
            reporter = TqdmReporter(desc="search")
            reporter(3, 193)
            bar.update.assert_called_with(3)
            bar.n = 3
            reporter(4, 193)
            bar.update.assert_called_with(1)
            reporter.close(4)

        tqdm_mod.tqdm.assert_called_once_with(total=193, unit="n", desc="search")
        bar.set_postfix.assert_called_once_with(stopped_at=4)
        bar.close.assert_called_once()

    def test_close_without_bar(self):
        TqdmReporter().close(0)


class TestResolveReporter:
    """Test resolution of the progress_callback argument."""

    def test_none_without_printing(self):
        assert resolve_reporter(None, 10, print_results=False) is None

    def test_none_with_printing(self):
        reporter = resolve_reporter(None, 10, print_results=True)
        assert isinstance(reporter, SweepProgress)
        assert isinstance(reporter._callback, PrintReporter)

    def test_false_disables(self):
        assert resolve_reporter(False, 10, print_results=True) is None

    def test_custom_callable(self):
        cb = MagicMock()
        reporter = resolve_reporter(cb, 10)
        reporter.start()
        cb.assert_called_with(0, 10)
        assert reporter.max_n == 10

    def test_empty_sweep(self):
        assert resolve_reporter(MagicMock(), 0) is None
