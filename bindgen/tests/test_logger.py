import logging

from bindgen import logger


class TestLogger:
    def test_warnings_go_to_stderr(self, capsys):
        logger.init_logging()
        logger.warning("Skipping Foo")
        assert "Skipping Foo" in capsys.readouterr().err

    def test_info_is_quiet_by_default(self, capsys):
        logger.init_logging()
        logger.info("Parsed 3 classes")
        assert "Parsed 3 classes" not in capsys.readouterr().err

    def test_verbose_shows_debug(self, capsys):
        logger.init_logging(verbose=True)
        logger.debug("details")
        assert "details" in capsys.readouterr().err

    def test_log_file_gets_everything(self, temp_dir):
        log_path = temp_dir / 'bindgen.log'
        logger.init_logging(log_path)
        logger.debug("debug line")
        logger.info("info line")
        for handler in logger.get_logger().handlers:
            handler.flush()
        text = log_path.read_text(encoding='utf-8')
        assert "debug line" in text
        assert "info line" in text

    def test_existing_log_is_rotated(self, temp_dir):
        log_path = temp_dir / 'bindgen.log'
        log_path.write_text("old run\n", encoding='utf-8')
        logger.init_logging(log_path)
        rotated = [p for p in temp_dir.iterdir() if p.name.startswith('bindgen_')]
        assert len(rotated) == 1
        assert rotated[0].read_text(encoding='utf-8') == "old run\n"

    def test_reinit_replaces_handlers(self):
        logger.init_logging()
        logger.init_logging()
        assert len(logger.get_logger().handlers) == 1

    def test_logger_does_not_propagate(self):
        assert logger.get_logger().propagate is False
        assert logger.get_logger() is logging.getLogger(logger.LOGGER_NAME)
