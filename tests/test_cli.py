"""
Tests for the nexstar command-line interface.

The telescope class and serial port discovery are patched, so commands run
without hardware.
"""

import unittest
from unittest.mock import MagicMock, patch

from typer.testing import CliRunner

from nexstar_serial.api.core.codecs import decode_timestamp
from nexstar_serial.api.core.enums import ConnectionType, Device, Model
from nexstar_serial.api.core.exceptions import TelescopeConnectionError, TelescopeTimeoutError
from nexstar_serial.api.core.types import (
    Coordinate,
    DeviceAbsent,
    DevicePresent,
    TelescopeInfo,
    Timestamp,
    VersionInfo,
)
from nexstar_serial.cli.main import app
from nexstar_serial.cli.utils import state


def fake_port(device: str) -> MagicMock:
    port = MagicMock()
    port.device = device
    return port


class CliTestCase(unittest.TestCase):
    """Base class patching the telescope used by open_telescope"""

    def setUp(self):
        self.runner = CliRunner()
        state.update_state(port=None, connection_type=ConnectionType.SERIAL, verbose=False, trace=False)

        patcher = patch("nexstar_serial.cli.utils.state.NexStarTelescope")
        self.mock_telescope_class = patcher.start()
        self.addCleanup(patcher.stop)
        self.telescope = self.mock_telescope_class.return_value
        self.telescope.target = "/dev/ttyUSB0"

    def invoke(self, *args: str):
        return self.runner.invoke(app, ["--port", "/dev/ttyUSB0", *args])


class TestPortSelection(CliTestCase):
    """Test suite for serial port discovery"""

    @patch("nexstar_serial.cli.utils.state.list_ports")
    def test_ports_listing(self, mock_list_ports):
        mock_list_ports.comports.return_value = [fake_port("/dev/ttyUSB1"), fake_port("/dev/ttyUSB0")]
        result = self.runner.invoke(app, ["connect", "ports"])
        self.assertEqual(result.exit_code, 0)
        self.assertIn("0. /dev/ttyUSB0", result.output)
        self.assertIn("1. /dev/ttyUSB1", result.output)

    @patch("nexstar_serial.cli.utils.state.list_ports")
    def test_no_ports_found(self, mock_list_ports):
        mock_list_ports.comports.return_value = []
        result = self.runner.invoke(app, ["mount", "aligned"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("No serial port(s) found", result.output)
        self.mock_telescope_class.assert_not_called()

    @patch("nexstar_serial.cli.utils.state.list_ports")
    def test_single_port_selected_automatically(self, mock_list_ports):
        mock_list_ports.comports.return_value = [fake_port("COM4")]
        self.telescope.is_aligned.return_value = True
        result = self.runner.invoke(app, ["mount", "aligned"])
        self.assertEqual(result.exit_code, 0)
        config = self.mock_telescope_class.call_args[0][0]
        self.assertEqual(config.port, "COM4")

    def test_tcp_needs_no_port(self):
        self.telescope.is_aligned.return_value = True
        result = self.runner.invoke(app, ["-c", "tcp", "--host", "10.0.0.2", "mount", "aligned"])
        self.assertEqual(result.exit_code, 0)
        config = self.mock_telescope_class.call_args[0][0]
        self.assertEqual(config.connection_type, ConnectionType.TCP)
        self.assertEqual(config.host, "10.0.0.2")


class TestConnectionHandling(CliTestCase):
    """Test suite for connection failures"""

    def test_connect_failure_exits(self):
        self.telescope.connect.side_effect = TelescopeConnectionError("Echo test failed")
        result = self.invoke("mount", "aligned")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Failed to connect", result.output)
        self.telescope.is_aligned.assert_not_called()

    def test_error_during_command_disconnects(self):
        self.telescope.is_aligned.side_effect = TelescopeTimeoutError("Timeout waiting for response")
        result = self.invoke("mount", "aligned")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Timeout waiting for response", result.output)
        self.telescope.disconnect.assert_called_once()

    def test_timeout_option(self):
        self.telescope.is_aligned.return_value = False
        result = self.runner.invoke(app, ["--port", "/dev/ttyUSB0", "--timeout", "1.5", "mount", "aligned"])
        self.assertEqual(result.exit_code, 0)
        self.assertEqual(self.mock_telescope_class.call_args[0][0].timeout, 1.5)


class TestMountCommands(CliTestCase):
    """Test suite for alignment and GOTO commands"""

    def test_aligned_json(self):
        self.telescope.is_aligned.return_value = True
        result = self.invoke("mount", "aligned", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertIn('"aligned": true', result.output)

    def test_not_aligned(self):
        self.telescope.is_aligned.return_value = False
        result = self.invoke("mount", "aligned")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("not aligned", result.output)

    def test_goto_status(self):
        self.telescope.is_goto_in_progress.return_value = True
        result = self.invoke("mount", "goto-status", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertIn('"goto_in_progress": true', result.output)

    def test_cancel(self):
        result = self.invoke("mount", "cancel")
        self.assertEqual(result.exit_code, 0)
        self.telescope.cancel_goto.assert_called_once()


class TestLocationCommands(CliTestCase):
    """Test suite for location commands"""

    def test_set_location(self):
        result = self.invoke("location", "set", "1.267401,103.8145683")
        self.assertEqual(result.exit_code, 0)
        self.telescope.set_location.assert_called_once_with(Coordinate(1.267401, 103.8145683))

    def test_set_location_negative(self):
        result = self.invoke("location", "set", "--", "-33.8568,-151.2153")
        self.assertEqual(result.exit_code, 0)
        self.telescope.set_location.assert_called_once_with(Coordinate(-33.8568, -151.2153))

    def test_set_location_invalid(self):
        result = self.invoke("location", "set", "north,east")
        self.assertEqual(result.exit_code, 1)
        self.mock_telescope_class.assert_not_called()

    def test_set_location_out_of_range(self):
        result = self.invoke("location", "set", "91,0")
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Latitude", result.output)

    def test_get_location_json(self):
        self.telescope.get_location.return_value = Coordinate(45.5, -122.25)
        result = self.invoke("location", "get", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertIn('"latitude": 45.5', result.output)
        self.assertIn('"longitude": -122.25', result.output)


class TestTimeCommands(CliTestCase):
    """Test suite for time commands"""

    def test_set_time(self):
        result = self.invoke(
            "time", "set",
            "--hour", "9", "--minute", "0", "--second", "0",
            "--month", "1", "--day", "2", "--year", "2025",
            "--utc-offset", "-5", "--dst",
        )
        self.assertEqual(result.exit_code, 0)
        self.telescope.set_time.assert_called_once_with(Timestamp(9, 0, 0, 1, 2, 2025, -5, True))

    def test_set_time_invalid_month(self):
        result = self.invoke(
            "time", "set",
            "--hour", "9", "--minute", "0", "--second", "0",
            "--month", "13", "--day", "2", "--year", "2025",
        )
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Invalid date/time", result.output)
        self.mock_telescope_class.assert_not_called()

    def test_set_time_year_out_of_range(self):
        result = self.invoke(
            "time", "set",
            "--hour", "9", "--minute", "0", "--second", "0",
            "--month", "1", "--day", "2", "--year", "1999",
        )
        self.assertEqual(result.exit_code, 1)
        self.mock_telescope_class.assert_not_called()

    def test_get_time_json(self):
        self.telescope.get_time.return_value = Timestamp(14, 30, 0, 6, 15, 2024, 8, False)
        result = self.invoke("time", "get", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertIn('"utc_offset": 8', result.output)
        self.assertIn("2024-06-15T14:30:00+08:00", result.output)

    def test_get_time_json_unset_clock(self):
        """Test a clock reporting month 0 still prints JSON"""
        self.telescope.get_time.return_value = decode_timestamp(bytes(8))
        result = self.invoke("time", "get", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertIn('"month": 0', result.output)
        self.assertIn('"iso": null', result.output)

    def test_get_time_json_offset_out_of_range(self):
        """Test an offset byte of 30 hours still prints JSON"""
        self.telescope.get_time.return_value = decode_timestamp(bytes([12, 0, 0, 6, 15, 24, 30, 0]))
        result = self.invoke("time", "get", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertIn('"utc_offset": 30', result.output)
        self.assertIn('"iso": null', result.output)

    def test_sync_utc(self):
        self.telescope.get_time.return_value = Timestamp(14, 30, 0, 6, 15, 2024, 0, False)
        result = self.invoke("time", "sync")
        self.assertEqual(result.exit_code, 0)
        sent = self.telescope.set_time.call_args[0][0]
        self.assertEqual(sent.utc_offset, 0)
        self.assertFalse(sent.daylight_saving)


class TestConnectCommands(CliTestCase):
    """Test suite for ping, info and status"""

    def setUp(self):
        super().setUp()
        self.telescope.get_info.return_value = TelescopeInfo(Model.SE68, VersionInfo(4, 21))
        self.telescope.query_device_version.side_effect = lambda device: (
            DevicePresent(device, VersionInfo(7, 11)) if device != Device.GPS else DeviceAbsent(device, "timeout")
        )

    def test_ping(self):
        self.telescope.ping.return_value = True
        result = self.invoke("connect", "ping")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("Ping succeeded", result.output)

    def test_ping_failed(self):
        self.telescope.ping.return_value = False
        result = self.invoke("connect", "ping")
        self.assertEqual(result.exit_code, 1)

    def test_info_json(self):
        result = self.invoke("connect", "info", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertIn('"model": "6/8 SE"', result.output)
        self.assertIn('"model_code": 12', result.output)
        self.assertIn('"version": "4.21"', result.output)
        self.telescope.query_device_version.assert_not_called()

    def test_info_devices(self):
        result = self.invoke("connect", "info", "--devices")
        self.assertEqual(result.exit_code, 0)
        self.assertIn("not installed", result.output)
        self.assertEqual(self.telescope.query_device_version.call_count, len(Device))

    def test_status_json(self):
        self.telescope.get_time.return_value = Timestamp(14, 30, 0, 6, 15, 2024, 8, False)
        self.telescope.get_location.return_value = Coordinate(1.2672222, 103.8144444)
        self.telescope.is_aligned.return_value = True
        self.telescope.is_goto_in_progress.return_value = False
        result = self.invoke("connect", "status", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertIn('"aligned": true', result.output)
        self.assertIn('"goto_in_progress": false', result.output)
        self.assertIn('"installed": false', result.output)
        self.telescope.disconnect.assert_called_once()

    def test_status_json_unset_clock(self):
        """Test status reports an impossible controller date as null"""
        self.telescope.get_time.return_value = decode_timestamp(bytes(8))
        self.telescope.get_location.return_value = Coordinate(0.0, 0.0)
        self.telescope.is_aligned.return_value = False
        self.telescope.is_goto_in_progress.return_value = False
        result = self.invoke("connect", "status", "--json")
        self.assertEqual(result.exit_code, 0)
        self.assertIn('"time": null', result.output)


if __name__ == "__main__":
    unittest.main()
