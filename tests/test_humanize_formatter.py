"""Tests for the humanize formatter"""

import io
import threading
from datetime import datetime
from unittest.mock import Mock

import pytest

from humanize_module import (
    HumanizeFormatter,
    JSONFormatter,
    LogEntry,
    LogLevel,
    FormatterConfig,
    RenderError,
    TerminalQueryError,
)
from humanize_module.terminal import TermInfo

TIMESTAMP = datetime(2024, 5, 1, 9, 30, 0)
DEMO_FIELDS = {"power_level": 9000, "dance": "flhargunstow"}
ERROR_TEXT = "oh heavens oh no an error eep"


def make_entry(message="This is the very polite log message", level=LogLevel.INFO,
               fields=None, out=None):
    return LogEntry(
        level=level,
        message=message,
        timestamp=TIMESTAMP,
        fields=dict(DEMO_FIELDS if fields is None else fields),
        out=out if out is not None else io.StringIO(),
    )


def terminal_provider(width=80, height=24):
    return Mock(return_value=TermInfo(is_terminal=True, width_cols=width, height_lines=height))


class Unprintable:
    def __str__(self):
        raise ValueError("cannot print me")


class TestLongFormat:
    """Test the default long layout."""

    def test_polite_message(self):
        formatter = HumanizeFormatter()
        out = formatter.format(make_entry())

        assert out == (
            "\n2024-05-01T09:30:00 [info]: This is the very polite log message"
            "\n          Fields:"
            "\n                    dance:         flhargunstow"
            "\n                    power_level:   9000"
        )

    def test_with_error(self):
        formatter = HumanizeFormatter()
        fields = {**DEMO_FIELDS, "error": RuntimeError(ERROR_TEXT)}
        out = formatter.format(make_entry("Alas, error city!", LogLevel.ERROR, fields))

        lines = out.split("\n")
        assert lines[1] == "2024-05-01T09:30:00 [error]: Alas, error city!"
        assert lines[-1] == "ERROR: " + ERROR_TEXT
        assert sum("ERROR" in line for line in lines) == 1
        assert not any(line.strip().startswith("error:") for line in lines)

    def test_empty_fields_is_header_only(self):
        formatter = HumanizeFormatter()
        out = formatter.format(make_entry("bare", fields={}))
        assert out == "\n2024-05-01T09:30:00 [info]: bare"

    def test_error_only_has_no_fields_block(self):
        formatter = HumanizeFormatter()
        out = formatter.format(make_entry("bare", fields={"error": ERROR_TEXT}))
        assert out == "\n2024-05-01T09:30:00 [info]: bare\nERROR: " + ERROR_TEXT

    def test_custom_date_time_format(self):
        formatter = HumanizeFormatter(date_time_format="%H:%M")
        out = formatter.format(make_entry(fields={"k": "v"}))
        assert out == "\n09:30 [info]: This is the very polite log message\n   Fields:\n      k:   v"


class TestCompactFormat:
    """Test the compact layout."""

    def test_fits_terminal_width(self):
        formatter = HumanizeFormatter(compact=True, term_info_provider=terminal_provider(80))
        out = formatter.format(make_entry("Now, compact!"))

        assert out == (
            "\n2024-05-01T09:30:00 [info]: Now, compact!"
            "\n        \tdance: flhargunstow\tpower_level: 9000"
        )

    def test_wraps_on_narrow_terminal(self):
        formatter = HumanizeFormatter(compact=True, term_info_provider=terminal_provider(30))
        out = formatter.format(make_entry("narrow"))
        assert out.endswith("\n        \tdance: flhargunstow\n    power_level: 9000")

    def test_error_not_wrapped(self):
        formatter = HumanizeFormatter(compact=True, term_info_provider=terminal_provider(10))
        fields = {**DEMO_FIELDS, "error": ERROR_TEXT}
        out = formatter.format(make_entry("x", LogLevel.ERROR, fields))
        assert out.endswith("\nERROR: " + ERROR_TEXT)

    def test_non_terminal_is_unconstrained(self):
        formatter = HumanizeFormatter(compact=True)
        fields = {f"field{i:02d}": "value" * 5 for i in range(30)}
        out = formatter.format(make_entry(fields=fields, out=io.StringIO()))

        assert formatter.term_info.is_terminal is False
        # header line, then one line of fields
        assert out.count("\n") == 2

    def test_toggle_between_calls(self):
        formatter = HumanizeFormatter(term_info_provider=terminal_provider())
        entry = make_entry()

        assert "Fields:" in formatter.format(entry)
        formatter.compact = True
        assert "Fields:" not in formatter.format(entry)
        assert formatter.config.compact is True
        formatter.compact = False
        assert "Fields:" in formatter.format(entry)


class TestTermInfoMemoization:
    """Test that the terminal is probed once per formatter."""

    def test_single_probe(self):
        provider = terminal_provider()
        formatter = HumanizeFormatter(term_info_provider=provider)

        for _ in range(10):
            formatter.format(make_entry())

        assert provider.call_count == 1
        assert formatter.term_info.width_cols == 80

    def test_resize_not_observed(self):
        provider = Mock(side_effect=[
            TermInfo(is_terminal=True, width_cols=200, height_lines=50),
            TermInfo(is_terminal=True, width_cols=10, height_lines=5),
        ])
        formatter = HumanizeFormatter(compact=True, term_info_provider=provider)

        first = formatter.format(make_entry())
        second = formatter.format(make_entry())
        assert first == second

    def test_single_probe_across_threads(self):
        calls = []
        gate = threading.Event()

        def slow_provider(stream):
            calls.append(stream)
            gate.wait(timeout=5)
            return TermInfo(is_terminal=True, width_cols=80, height_lines=24)

        formatter = HumanizeFormatter(term_info_provider=slow_provider)
        results = []
        results_lock = threading.Lock()

        def worker():
            text = formatter.format(make_entry())
            with results_lock:
                results.append(text)

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        gate.set()
        for t in threads:
            t.join(timeout=5)

        assert len(calls) == 1
        assert len(results) == 8
        assert len(set(results)) == 1

    def test_no_sink_skips_probe(self):
        provider = terminal_provider()
        formatter = HumanizeFormatter(term_info_provider=provider)
        entry = LogEntry(level=LogLevel.INFO, message="detached", timestamp=TIMESTAMP)

        assert formatter.format(entry) == "\n2024-05-01T09:30:00 [info]: detached"
        provider.assert_not_called()
        assert formatter.term_info == TermInfo()

    def test_probe_failure_is_reported_not_raised(self, capsys):
        provider = Mock(side_effect=TerminalQueryError("no size"))
        formatter = HumanizeFormatter(compact=True, term_info_provider=provider)

        out = formatter.format(make_entry())
        assert "dance: flhargunstow" in out
        assert formatter.term_info.is_terminal is False
        assert "Failed to initialize terminal" in capsys.readouterr().err

        formatter.format(make_entry())
        assert provider.call_count == 1

    def test_unexpected_provider_error_is_reported_not_raised(self, capsys):
        provider = Mock(side_effect=RuntimeError("boom"))
        formatter = HumanizeFormatter(term_info_provider=provider)

        out = formatter.format(make_entry())
        assert out.startswith("\n2024-05-01T09:30:00 [info]: ")
        assert formatter.term_info == TermInfo()
        assert "boom" in capsys.readouterr().err

        formatter.format(make_entry())
        assert provider.call_count == 1


class TestColors:
    """Test optional level coloring."""

    def test_colored_on_terminal(self):
        formatter = HumanizeFormatter(colored=True, term_info_provider=terminal_provider())
        out = formatter.format(make_entry("boom", LogLevel.ERROR, fields={}))
        assert out == "\n2024-05-01T09:30:00 [\x1b[31merror\x1b[0m]: boom"

    def test_not_colored_off_terminal(self):
        formatter = HumanizeFormatter(colored=True)
        out = formatter.format(make_entry("boom", LogLevel.ERROR, fields={}))
        assert "\x1b[" not in out


class TestRenderFailure:
    """Test that rendering failures surface as RenderError."""

    @pytest.mark.parametrize("compact", [False, True])
    def test_unprintable_field(self, compact):
        formatter = HumanizeFormatter(compact=compact)
        with pytest.raises(RenderError) as exc_info:
            formatter.format(make_entry(fields={"bad": Unprintable()}))
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_unprintable_error(self):
        formatter = HumanizeFormatter()
        with pytest.raises(RenderError):
            formatter.format(make_entry(fields={"error": Unprintable()}))


class TestFormatterConstruction:
    """Test formatter configuration handling."""

    def test_defaults(self):
        formatter = HumanizeFormatter()
        assert formatter.compact is False
        assert formatter.date_time_format == "%Y-%m-%dT%H:%M:%S"
        assert isinstance(formatter.fallback, JSONFormatter)

    def test_config_and_overrides(self):
        config = FormatterConfig(date_time_format="%H:%M:%S")
        formatter = HumanizeFormatter(config, compact=True)
        assert formatter.compact is True
        assert formatter.date_time_format == "%H:%M:%S"

    def test_unknown_override(self):
        with pytest.raises(TypeError):
            HumanizeFormatter(no_such_option=True)

    def test_format_bytes(self):
        formatter = HumanizeFormatter()
        data = formatter.format_bytes(make_entry(fields={}))
        assert data == b"\n2024-05-01T09:30:00 [info]: This is the very polite log message"

    def test_callable(self):
        formatter = HumanizeFormatter()
        entry = make_entry()
        assert formatter(entry) == formatter.format(entry)

    def test_repr(self):
        assert "compact" in repr(HumanizeFormatter(compact=True))
