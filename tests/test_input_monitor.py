import io

from vos.input_monitor import InputMonitor
from vos.logger import Logger


def _logger():
    stream = io.StringIO()
    logger = Logger(stream=stream)
    logger.initialize()
    return logger, stream


def test_exit_requests_shutdown():
    logger, _ = _logger()
    monitor = InputMonitor(logger, io.StringIO("exit\n"))
    monitor.start()
    monitor.stop()
    assert monitor.is_shutdown_requested() is True


def test_unknown_command_gets_feedback():
    logger, out = _logger()
    monitor = InputMonitor(logger, io.StringIO("hello\nexit\n"))
    monitor.start()
    monitor.stop()
    output = out.getvalue()
    assert "Unknown command 'hello'. Type 'exit' to shutdown" in output
    assert output.count("> ") == 2
    assert monitor.is_shutdown_requested() is True


def test_lines_after_exit_are_not_read():
    logger, out = _logger()
    source = io.StringIO("exit\nlater\n")
    monitor = InputMonitor(logger, source)
    monitor.start()
    monitor.stop()
    assert "later" not in out.getvalue()
    assert source.readline() == "later\n"


def test_end_of_input_requests_shutdown():
    logger, _ = _logger()
    monitor = InputMonitor(logger, io.StringIO(""))
    monitor.start()
    monitor.stop()
    assert monitor.is_shutdown_requested() is True


def test_handle_command_exit():
    logger, _ = _logger()
    monitor = InputMonitor(logger, io.StringIO())
    assert monitor.handle_command("exit\n") is True
    assert monitor.is_shutdown_requested() is True


def test_handle_command_empty_is_silent():
    logger, out = _logger()
    monitor = InputMonitor(logger, io.StringIO())
    assert monitor.handle_command("\n") is False
    assert out.getvalue() == ""
    assert monitor.is_shutdown_requested() is False


def test_handle_command_is_exact_match():
    logger, out = _logger()
    monitor = InputMonitor(logger, io.StringIO())
    assert monitor.handle_command("exit now") is False
    assert monitor.is_shutdown_requested() is False
    assert "Unknown command 'exit now'" in out.getvalue()


def test_no_shutdown_before_start():
    logger, _ = _logger()
    monitor = InputMonitor(logger, io.StringIO("exit\n"))
    monitor.stop()
    assert monitor.is_shutdown_requested() is False