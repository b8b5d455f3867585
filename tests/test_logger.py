import pytest

import packkit.logger as logmod

LEVELS = ["debug", "error", "info", "trace", "warning"]


@pytest.mark.parametrize("level", LEVELS)
def test_fmt_logger_prints_message(level, capsys):
    getattr(logmod.FmtLogger(), level)("hello there")
    assert capsys.readouterr().out == "hello there\n"


def test_fmt_logger_error_with_context(capsys):
    logmod.FmtLogger().error_with_context(ValueError("boom"), "subject", "ctx one", "ctx two")
    assert capsys.readouterr().out == "err: boom\nsubject\nctx one\nctx two\n"


def test_fmt_logger_error_with_context_without_extra(capsys):
    logmod.FmtLogger().error_with_context("broken", "subject")
    assert capsys.readouterr().out.splitlines() == ["err: broken", "subject"]


def test_default_logger_prints(capsys):
    logger = logmod.default()
    logger.info("from default")
    assert isinstance(logger, logmod.FmtLogger)
    assert capsys.readouterr().out == "from default\n"


@pytest.mark.parametrize("level", LEVELS)
def test_test_logger_forwards(level):
    messages = []
    logger = logmod.new_test_logger(messages.append)
    getattr(logger, level)("forwarded")
    assert messages == ["forwarded"]


def test_test_logger_error_with_context():
    messages = []
    logger = logmod.TestLogger(messages.append)
    logger.error_with_context(RuntimeError("bad"), "sub", "a", "b")
    assert messages == ["err: bad", "sub", "a", "b"]


def test_test_logger_keeps_order_across_levels():
    messages = []
    logger = logmod.new_test_logger(messages.append)
    logger.debug("first")
    logger.warning("second")
    logger.error("third")
    assert messages == ["first", "second", "third"]


def test_logger_interface_is_abstract():
    with pytest.raises(TypeError):
        logmod.Logger()