from __future__ import annotations

"""
Integration tests for the Logger write pipeline.

Verifies:
1. Header layout and per-level tags.
2. Zero-argument (verbatim) vs. argument (expanded) call paths.
3. Byte-identical fan-out to console and file.
4. Destination toggles, reconfiguration and collision-free file naming.
"""

import io
import logging
from pathlib import Path

import pytest

from tinylog import Level, LoggerConfig, TinyLog
from tinylog.core.logger import MAX_REPORTED_KEYS


def _read(path: str) -> str:
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


# -----------------------------------------------------------------------------
# Line format
# -----------------------------------------------------------------------------

def test_header_layout(make_logger, console, fixed_stamp) -> None:
    lg = make_logger("Core")
    lg.info("hello")
    assert console.getvalue() == f"{fixed_stamp} [Core] INFO hello\n"


@pytest.mark.parametrize(
    "method, tag",
    [
        ("info", "INFO"),
        ("error", "ERROR"),
        ("debug", "DEBUG"),
        ("global_", "GLOBAL"),
        ("fatal", "FATAL"),
        ("warning", "WARNING"),
        ("trace", "TRACE"),
    ],
)
def test_level_writers_tag_their_lines(make_logger, console, fixed_stamp, method, tag) -> None:
    lg = make_logger("L", to_file=False)
    getattr(lg, method)("x=%d", 1)
    assert console.getvalue() == f"{fixed_stamp} [L] {tag} x=1\n"


def test_verbose_has_no_dedicated_writer(make_logger, console) -> None:
    lg = make_logger(to_file=False)
    assert not hasattr(lg, "verbose")

    lg.log(Level.VERBOSE, "chatty")
    assert " VERBOSE chatty\n" in console.getvalue()


def test_zero_argument_call_is_verbatim(make_logger, console) -> None:
    lg = make_logger(to_file=False)
    lg.info("100%% done, %d left")
    assert console.getvalue().endswith(" INFO 100%% done, %d left\n")


def test_argument_call_expands_template(make_logger, console) -> None:
    lg = make_logger(to_file=False)
    lg.info("a%db%dc", 1, 2)
    assert console.getvalue().endswith(" INFO a1b2c\n")


def test_argument_call_unescapes_percent(make_logger, console) -> None:
    lg = make_logger(to_file=False)
    lg.info("%d%% done", 100)
    assert console.getvalue().endswith(" INFO 100% done\n")


def test_missing_arguments_truncate_and_report_once(make_logger, console, caplog) -> None:
    lg = make_logger(to_file=False)
    with caplog.at_level(logging.WARNING, logger="tinylog"):
        lg.info("a=%d b=%d", 1)
        lg.info("a=%d b=%d", 2)

    assert console.getvalue().splitlines()[0].endswith(" INFO a=1 b=")
    assert console.getvalue().splitlines()[1].endswith(" INFO a=2 b=")
    assert sum("more placeholders" in r.getMessage() for r in caplog.records) == 1


def test_failing_argument_never_raises(make_logger, console) -> None:
    class Broken:
        def __str__(self) -> str:
            raise RuntimeError("boom")

    lg = make_logger(to_file=False)
    lg.error("value: %s", Broken())
    assert console.getvalue().endswith(" ERROR value: %s\n")


def test_sequential_writes_each_end_with_one_newline(make_logger, console) -> None:
    lg = make_logger(to_file=False)
    lg.info("first")
    lg.warning("second %s", "line")

    out = console.getvalue()
    lines = out.split("\n")
    assert lines[-1] == ""
    assert len(lines) == 3
    assert lines[0].endswith("INFO first")
    assert lines[1].endswith("WARNING second line")


# -----------------------------------------------------------------------------
# Destinations
# -----------------------------------------------------------------------------

def test_console_and_file_receive_identical_bytes(make_logger, console) -> None:
    lg = make_logger()
    lg.info("same %s", "bytes")
    lg.close()

    assert _read(lg.file_path) == console.getvalue()


def test_default_file_location(make_logger, log_dir) -> None:
    lg = make_logger()
    assert lg.file_path == log_dir + "tinylog.log"
    assert lg.file_available
    assert Path(lg.file_path).is_file()


def test_default_file_is_appended_across_instances(make_logger) -> None:
    first = make_logger("One", to_console=False)
    first.info("from one")
    first.close()

    second = make_logger("Two", to_console=False)
    assert second.file_path == first.file_path
    second.info("from two")
    second.close()

    content = _read(second.file_path)
    assert "[One] INFO from one\n" in content
    assert content.endswith("[Two] INFO from two\n")


def test_toggling_destinations(make_logger, console) -> None:
    lg = make_logger()
    lg.set_console_enabled(False)
    lg.info("file only")
    lg.set_console_enabled(True)
    lg.set_file_enabled(False)
    lg.info("console only")
    lg.close()

    assert "file only" not in console.getvalue()
    assert "console only" in console.getvalue()
    content = _read(lg.file_path)
    assert "file only" in content
    assert "console only" not in content


def test_silent_logger_is_a_no_op(make_logger, console) -> None:
    lg = make_logger(to_console=False, to_file=False)
    lg.info("nothing %d", 1)
    lg.fatal("nothing")
    lg.close()

    assert console.getvalue() == ""
    assert _read(lg.file_path) == ""


def test_default_stream_is_stdout(tmp_path, capsys) -> None:
    lg = TinyLog("Std", log_path=str(tmp_path), to_file=False)
    lg.info("to stdout")
    lg.close()

    captured = capsys.readouterr()
    assert captured.out.endswith("[Std] INFO to stdout\n")
    assert captured.err == ""


# -----------------------------------------------------------------------------
# Reconfiguration
# -----------------------------------------------------------------------------

def test_custom_file_name_avoids_existing_file(make_logger, log_dir) -> None:
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    Path(log_dir, "app.log").write_text("previous run\n", encoding="utf-8")

    lg = make_logger(file_name="app", to_console=False)
    assert lg.file_path == log_dir + "app_0.log"
    assert lg.rotation_counter == 1

    lg.info("new run")
    lg.close()
    assert _read(log_dir + "app.log") == "previous run\n"


def test_set_logger_name_reopens_file_and_preserves_old_content(make_logger, log_dir) -> None:
    lg = make_logger("Before", file_name="svc", to_console=False)
    old_path = lg.file_path
    lg.info("old line")

    lg.set_logger_name("After")
    assert lg.name == "After"
    assert lg.file_path == log_dir + "svc_0.log"
    lg.info("new line")
    lg.close()

    assert _read(old_path).endswith("[Before] INFO old line\n")
    assert "new line" not in _read(old_path)
    assert _read(lg.file_path).endswith("[After] INFO new line\n")


def test_set_file_name_resets_rotation_counter(make_logger, log_dir) -> None:
    Path(log_dir).mkdir(parents=True, exist_ok=True)
    Path(log_dir, "a.log").write_text("")
    Path(log_dir, "a_0.log").write_text("")

    lg = make_logger(file_name="a", to_console=False)
    assert lg.rotation_counter == 2

    lg.set_file_name("b")
    assert lg.rotation_counter == 0
    assert lg.file_path == log_dir + "b.log"
    assert lg.file_base_name == "b"


def test_set_log_path_creates_directory(make_logger, tmp_path) -> None:
    lg = make_logger(to_console=False)
    target = tmp_path / "elsewhere" / "deep"

    lg.set_log_path(str(target))
    assert lg.directory == str(target) + "/"
    lg.info("moved")
    lg.close()

    assert (target / "tinylog.log").read_text(encoding="utf-8").endswith("INFO moved\n")


def test_from_config_and_configure(tmp_path, console, fixed_clock) -> None:
    cfg = LoggerConfig(logger_name="Cfg", log_path=str(tmp_path), file_name="cfg", to_console=True, to_file=False)
    with TinyLog.from_config(cfg, stream=console, clock=fixed_clock) as lg:
        assert lg.to_file is False
        lg.info("one")

        lg.configure(LoggerConfig(logger_name="Cfg2", log_path=str(tmp_path), to_console=False, to_file=True))
        assert lg.name == "Cfg2"
        assert lg.file_path == str(tmp_path) + "/tinylog.log"
        lg.info("two")

    assert "one" in console.getvalue()
    assert "two" not in console.getvalue()
    assert (tmp_path / "tinylog.log").read_text(encoding="utf-8").endswith("[Cfg2] INFO two\n")


# -----------------------------------------------------------------------------
# Failure handling
# -----------------------------------------------------------------------------

def test_unusable_directory_degrades_to_console(tmp_path, console, fixed_clock, caplog) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("plain file")

    with caplog.at_level(logging.WARNING, logger="tinylog"):
        lg = TinyLog("Broken", log_path=str(blocker / "logs"), stream=console, clock=fixed_clock)
        lg.info("still works")
        lg.info("and again")

    assert not lg.file_available
    assert lg.last_error is not None
    assert console.getvalue().count("still works") == 1
    assert sum("Cannot create log directory" in r.getMessage() for r in caplog.records) == 1

    lg.set_log_path(str(tmp_path / "ok"))
    assert lg.file_available
    assert lg.last_error is None
    lg.close()


def test_writes_after_close_reach_console_only(make_logger, console) -> None:
    lg = make_logger()
    lg.close()
    lg.close()
    lg.info("after close")

    assert "after close" in console.getvalue()
    assert "after close" not in _read(lg.file_path)
    assert not lg.file_available


def test_console_stream_failure_drops_console_quietly(make_logger, capsys, caplog) -> None:
    stream = io.StringIO()
    lg = make_logger(stream=stream)
    stream.close()

    with caplog.at_level(logging.WARNING, logger="tinylog"):
        for i in range(3):
            lg.info("into a closed stream %d", i)

    captured = capsys.readouterr()
    assert "Logging error" not in captured.err
    assert "Traceback" not in captured.err
    assert not lg.console_available
    assert lg.to_console is True
    assert sum("console output disabled" in r.getMessage() for r in caplog.records) == 1

    lg.close()
    content = _read(lg.file_path)
    assert content.count("into a closed stream") == 3


def test_non_member_levels_are_tagged_unknown(make_logger, console) -> None:
    lg = make_logger(to_file=False)
    lg.log(None, "from none")  # type: ignore[arg-type]
    lg.log("INFO", "from str")  # type: ignore[arg-type]
    lg.log(3, "from int")  # type: ignore[arg-type]

    lines = console.getvalue().splitlines()
    assert len(lines) == 3
    assert lines[0].endswith(" UNKNOWN from none")
    assert lines[1].endswith(" UNKNOWN from str")
    assert lines[2].endswith(" UNKNOWN from int")


def test_one_time_diagnostics_memory_is_bounded(make_logger, console, caplog) -> None:
    lg = make_logger(to_file=False)
    with caplog.at_level(logging.WARNING, logger="tinylog"):
        for i in range(MAX_REPORTED_KEYS * 3):
            lg.info(f"dynamic {i} %d %d", i)

    assert len(lg._reported) == MAX_REPORTED_KEYS
    assert sum("more placeholders" in r.getMessage() for r in caplog.records) == MAX_REPORTED_KEYS * 3
    assert len(console.getvalue().splitlines()) == MAX_REPORTED_KEYS * 3
