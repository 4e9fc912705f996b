import logging

from backend.core.logging_config import AccessPathExcludeFilter, configure_logging


def _make_access_record(path: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="uvicorn.access",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg='%s - "%s %s HTTP/%s" %s',
        args=("127.0.0.1", "GET", path, "1.1", 200),
        exc_info=None,
    )


def test_access_log_excludes_health_probes() -> None:
    access_filter = AccessPathExcludeFilter()

    assert access_filter.filter(_make_access_record("/health")) is False
    assert access_filter.filter(_make_access_record("/health?probe=1")) is False
    assert access_filter.filter(_make_access_record("/vehicles/")) is True


def test_access_log_keeps_records_without_access_args() -> None:
    record = logging.LogRecord("uvicorn.access", logging.INFO, __file__, 1, "started", None, None)
    assert AccessPathExcludeFilter(["/health"]).filter(record) is True


def test_configure_logging_writes_rotating_file(tmp_path) -> None:
    configure_logging(tmp_path)
    logging.getLogger("backend.tests").info("hello from tests")
    for handler in logging.getLogger().handlers:
        handler.flush()

    log_file = tmp_path / "backend.log"
    assert log_file.exists()
    assert "hello from tests" in log_file.read_text(encoding="utf-8")
