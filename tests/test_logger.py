import logging

from divi_blocks.common.utils.logger import NOTICE_LEVEL, CustomLogger, configure_logging, get_logger


def test_loggers_live_under_the_package_namespace():
    assert get_logger().name == "divi_blocks"
    assert get_logger("processor").name == "divi_blocks.processor"
    assert get_logger("divi_blocks.blocks.core").name == "divi_blocks.blocks.core"
    assert isinstance(get_logger("processor"), CustomLogger)


def test_info_is_promoted_to_notice_and_debug_reaches_the_file(tmp_path):
    configure_logging(log_dir=str(tmp_path))
    try:
        records: list[logging.LogRecord] = []
        capture = logging.Handler()
        capture.emit = records.append  # type: ignore[method-assign]
        package_logger = logging.getLogger("divi_blocks")
        package_logger.addHandler(capture)

        log = get_logger("tests")
        log.info("progress")
        log.debug("details")

        package_logger.removeHandler(capture)
        for handler in package_logger.handlers:
            handler.flush()

        assert [r.levelno for r in records] == [NOTICE_LEVEL, logging.DEBUG]
        content = (tmp_path / "app.log").read_text(encoding="utf-8")
        assert "progress" in content and "details" in content
    finally:
        configure_logging()
