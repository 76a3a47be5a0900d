import unittest

from tickworker.errors import NO_FUNCTION_SET, ErrorCode, WorkerError


class WorkerErrorTests(unittest.TestCase):
    def test_message(self):
        self.assertEqual(str(NO_FUNCTION_SET), "no function set to execute")
        self.assertEqual(str(WorkerError(255)), "unknown error")

    def test_compares_by_code_not_instance(self):
        self.assertEqual(NO_FUNCTION_SET, WorkerError(ErrorCode.NO_FUNCTION_SET))
        self.assertNotEqual(NO_FUNCTION_SET, WorkerError(255))
        self.assertNotEqual(NO_FUNCTION_SET, RuntimeError("no function set to execute"))
        self.assertEqual(hash(NO_FUNCTION_SET), hash(WorkerError(0)))

    def test_matches(self):
        self.assertTrue(NO_FUNCTION_SET.matches(NO_FUNCTION_SET))
        self.assertFalse(NO_FUNCTION_SET.matches(ValueError("different error")))
        self.assertFalse(WorkerError(255).matches(NO_FUNCTION_SET))

    def test_is_an_exception(self):
        with self.assertRaises(WorkerError) as caught:
            raise WorkerError(ErrorCode.NO_FUNCTION_SET)
        self.assertEqual(caught.exception.code, ErrorCode.NO_FUNCTION_SET)


if __name__ == "__main__":
    unittest.main()
