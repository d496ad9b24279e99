import logging

from chatprofile.logging import (
    ColoredFormatter,
    configure_logging_from_args,
    format_exception_summary,
    get_logger,
    resolve_level,
    setup_logging,
)


def test_get_logger_prefixes_chatprofile_namespace() -> None:
    assert get_logger("module").name == "chatprofile.module"
    assert get_logger("chatprofile.profiles.draft").name == "chatprofile.profiles.draft"


def test_colored_formatter_formats_message() -> None:
    formatter = ColoredFormatter("[%(levelname)s] %(message)s", use_colors=False)
    record = logging.LogRecord(
        name="chatprofile.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="hello",
        args=(),
        exc_info=None,
    )
    rendered = formatter.format(record)
    assert "[INFO] hello" in rendered


def test_colored_formatter_does_not_mutate_record() -> None:
    formatter = ColoredFormatter("%(levelname)s", use_colors=True)
    record = logging.LogRecord("chatprofile.test", logging.WARNING, __file__, 1, "msg", (), None)

    rendered = formatter.format(record)

    assert "\033[" in rendered
    assert record.levelname == "WARNING"


def test_setup_logging_with_file_handler(tmp_path) -> None:
    log_file = tmp_path / "chatprofile.log"
    setup_logging(level="DEBUG", log_file=str(log_file))
    logger = get_logger("test")
    logger.debug("debug entry")

    assert log_file.exists()
    content = log_file.read_text(encoding="utf-8")
    assert "debug entry" in content


def test_configure_logging_from_args_selects_level(monkeypatch) -> None:
    calls = []

    def _fake_setup(level: str = "INFO", log_file=None):
        calls.append((level, log_file))

    monkeypatch.setattr("chatprofile.logging.setup_logging", _fake_setup)
    configure_logging_from_args(verbose=True, log_level=None, log_file=None)
    configure_logging_from_args(verbose=False, log_level="info", log_file="x.log")
    configure_logging_from_args()

    assert calls[0][0] == "DEBUG"
    assert calls[1] == ("INFO", "x.log")
    assert calls[2] == ("WARNING", None)


def test_format_exception_summary_truncates_long_messages() -> None:
    error = RuntimeError("x" * 300)
    summary = format_exception_summary(error, max_length=40)
    assert summary.startswith("RuntimeError: ")
    assert summary.endswith("...")
    assert len(summary) == 40


def test_format_exception_summary_without_message() -> None:
    assert format_exception_summary(KeyError()) == "KeyError"


def test_resolve_level_prefers_explicit_level() -> None:
    assert resolve_level(verbose=True, log_level="error") == "ERROR"
    assert resolve_level(verbose=True) == "DEBUG"
    assert resolve_level() == "WARNING"
