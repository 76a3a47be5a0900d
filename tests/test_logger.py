import io
import logging
import unittest
from contextlib import redirect_stderr, redirect_stdout

from tickworker.logger import LoggingLogger, NullLogger, StdLogger


class StdLoggerTests(unittest.TestCase):
    def test_errorf_writes_prefixed_line_to_stderr(self):
        err = io.StringIO()
        with redirect_stderr(err):
            StdLogger().errorf("error message %d\n", 42)
        self.assertEqual(err.getvalue(), "ERROR: error message 42\n")

    def test_printf_writes_to_stdout(self):
        out = io.StringIO()
        with redirect_stdout(out):
            StdLogger().printf("%s started\n", "poller")
        self.assertEqual(out.getvalue(), "poller started\n")

    def test_format_without_args_is_verbatim(self):
        out = io.StringIO()
        with redirect_stdout(out):
            StdLogger().printf("100% done\n")
        self.assertEqual(out.getvalue(), "100% done\n")


class LoggingLoggerTests(unittest.TestCase):
    def test_forwards_to_stdlib_logger(self):
        logger = logging.getLogger("tickworker.tests")
        with self.assertLogs(logger, level="INFO") as captured:
            adapter = LoggingLogger(logger)
            adapter.printf("%s started\n", "poller")
            adapter.errorf("%s: boom\n", "poller")
        self.assertEqual(
            captured.output,
            [
                "INFO:tickworker.tests:poller started",
                "ERROR:tickworker.tests:poller: boom",
            ],
        )

    def test_null_logger_is_silent(self):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            NullLogger().printf("x\n")
            NullLogger().errorf("y\n")
        self.assertEqual(out.getvalue() + err.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
