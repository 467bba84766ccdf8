"""
Unit tests for exceptions module.

Tests the exception hierarchy raised by the protocol client.
"""

import pickle
import unittest

from nexstar_serial.api.core.exceptions import (
    CommandError,
    NexstarError,
    NotConnectedError,
    ResponseLengthError,
    TelescopeConnectionError,
    TelescopeTimeoutError,
)


class TestNexstarError(unittest.TestCase):
    """Test suite for NexstarError base exception"""

    def test_is_exception(self):
        """Test that NexstarError is an Exception"""
        self.assertTrue(issubclass(NexstarError, Exception))

    def test_instantiation(self):
        """Test creating a NexstarError instance"""
        self.assertEqual(str(NexstarError("Test error message")), "Test error message")

    def test_subclasses(self):
        """Test that every library exception derives from NexstarError"""
        for exc in (TelescopeConnectionError, TelescopeTimeoutError, NotConnectedError, CommandError):
            with self.subTest(exc=exc):
                self.assertTrue(issubclass(exc, NexstarError))

    def test_timeout_is_not_connection_error(self):
        """Test timeouts can be told apart from transport failures"""
        self.assertFalse(issubclass(TelescopeTimeoutError, TelescopeConnectionError))


class TestResponseLengthError(unittest.TestCase):
    """Test suite for ResponseLengthError"""

    def test_inherits_from_command_error(self):
        """Test that ResponseLengthError is a CommandError"""
        self.assertTrue(issubclass(ResponseLengthError, CommandError))

    def test_carries_counts(self):
        """Test received/expected counts and message"""
        error = ResponseLengthError(3, 8)
        self.assertEqual(error.received, 3)
        self.assertEqual(error.expected, 8)
        self.assertEqual(str(error), "Length of response (3) does not match expected length (8).")

    def test_pickle(self):
        """Test the error survives pickling with its counts"""
        error = pickle.loads(pickle.dumps(ResponseLengthError(0, 2)))
        self.assertEqual((error.received, error.expected), (0, 2))


if __name__ == "__main__":
    unittest.main()
