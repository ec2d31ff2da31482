import io
import signal
import sys

import pytest

from cnamesweep import cli
from cnamesweep.config import DEFAULT_RESOLVERS


class RecordingScanner:
    instances = []

    def __init__(self, config):
        self.config = config
        self.lines = None
        RecordingScanner.instances.append(self)

    def run(self, lines, stop_event=None):
        self.lines = [line for line in lines]
        self.stop_event = stop_event
        return {"jobs": len(self.lines), "ok": 0, "dangling": 0, "takeover": 0}


@pytest.fixture
def recording_scanner(monkeypatch):
    RecordingScanner.instances = []
    monkeypatch.setattr(cli, "DanglingCnameScanner", RecordingScanner)
    return RecordingScanner


def test_defaults_match_original_tool():
    args = cli.build_parser().parse_args([])
    assert (args.concurrency, args.timeout, args.retries, args.verbose, args.input) == (20, 5.0, 2, False, None)


def test_short_flags():
    args = cli.build_parser().parse_args(["-c", "50", "-t", "2.5", "-r", "0", "-v", "-i", "domains.txt"])
    assert (args.concurrency, args.timeout, args.retries, args.verbose, args.input) == (50, 2.5, 0, True, "domains.txt")


def test_reads_stdin_by_default(monkeypatch, recording_scanner):
    monkeypatch.setattr(sys, "stdin", io.StringIO("a.example.com\nb.example.com\n"))

    assert cli.main(["-c", "3", "-v"]) == 0

    scanner = recording_scanner.instances[0]
    assert scanner.lines == ["a.example.com\n", "b.example.com\n"]
    assert scanner.config.concurrency == 3
    assert scanner.config.verbose is True
    assert scanner.config.resolvers == DEFAULT_RESOLVERS
    assert scanner.stop_event is not None and not scanner.stop_event.is_set()


def test_reads_input_file(tmp_path, recording_scanner):
    domains = tmp_path / "domains.txt"
    domains.write_text("abandoned.example.com\n\nwww.example.com\n")

    assert cli.main(["--input", str(domains)]) == 0
    assert recording_scanner.instances[0].lines == ["abandoned.example.com\n", "\n", "www.example.com\n"]


def test_missing_input_file_fails(tmp_path, recording_scanner):
    assert cli.main(["--input", str(tmp_path / "missing.txt")]) == 1


def test_invalid_concurrency_is_a_usage_error(recording_scanner):
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["-c", "0"])
    assert excinfo.value.code == 2
    assert recording_scanner.instances == []


def test_sigint_handler_is_restored(monkeypatch, recording_scanner):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    before = signal.getsignal(signal.SIGINT)
    cli.main([])
    assert signal.getsignal(signal.SIGINT) is before


def test_first_interrupt_stops_and_second_one_aborts(monkeypatch):
    observed = {}
    before = signal.getsignal(signal.SIGINT)

    class InterruptedScanner(RecordingScanner):
        def run(self, lines, stop_event=None):
            signal.getsignal(signal.SIGINT)(signal.SIGINT, None)
            observed["stopped"] = stop_event.is_set()
            observed["handler_after_first"] = signal.getsignal(signal.SIGINT)
            return {"jobs": 0, "ok": 0, "dangling": 0, "takeover": 0}

    monkeypatch.setattr(cli, "DanglingCnameScanner", InterruptedScanner)
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))

    assert cli.main([]) == 0
    assert observed["stopped"] is True
    assert observed["handler_after_first"] is before


def test_input_file_is_read_as_utf8(tmp_path, monkeypatch, recording_scanner):
    opened = []

    def recording_open(path, mode="r", **kwargs):
        opened.append(kwargs.get("encoding"))
        return open(path, mode, **kwargs)

    monkeypatch.setattr(cli, "open", recording_open, raising=False)
    domains = tmp_path / "domains.txt"
    domains.write_bytes("bücher.example.com\n".encode("utf-8"))

    assert cli.main(["-i", str(domains)]) == 0
    assert recording_scanner.instances[0].lines == ["bücher.example.com\n"]
    assert opened == ["utf-8"]
