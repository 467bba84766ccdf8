"""
Unit tests for enums module.

Tests device/model byte codes and the explicit unrecognized variants.
"""

import unittest

from nexstar_serial.api.core.enums import ConnectionType, Device, Model, UnrecognizedDevice, UnrecognizedModel


class TestDevice(unittest.TestCase):
    """Test suite for Device enum"""

    def test_enum_values(self):
        """Test all Device byte codes"""
        self.assertEqual(Device.AZM_RA_MOTOR.value, 16)
        self.assertEqual(Device.ALT_DEC_MOTOR.value, 17)
        self.assertEqual(Device.GPS.value, 176)
        self.assertEqual(Device.RTC.value, 178)

    def test_from_code_known(self):
        """Test each code maps to exactly one member"""
        for device in Device:
            with self.subTest(device=device):
                self.assertIs(Device.from_code(device.value), device)

    def test_from_code_unknown(self):
        """Test unknown codes are reported, not cast"""
        self.assertEqual(Device.from_code(18), UnrecognizedDevice(18))
        self.assertEqual(str(UnrecognizedDevice(18)), "Unknown device (18)")

    def test_labels(self):
        """Test display labels"""
        self.assertEqual(Device.AZM_RA_MOTOR.label, "AZM/RA Motor")
        self.assertEqual(Device.ALT_DEC_MOTOR.label, "ALT/DEC Motor")

    def test_code(self):
        """Test code property"""
        self.assertEqual(Device.GPS.code, 176)


class TestModel(unittest.TestCase):
    """Test suite for Model enum"""

    def test_enum_values(self):
        """Test all Model byte codes"""
        expected = {
            Model.GPS: 1,
            Model.I_SERIES: 3,
            Model.I_SERIES_SE: 4,
            Model.CGE: 5,
            Model.ADVANCED_GT: 6,
            Model.SLT: 7,
            Model.CPC: 9,
            Model.GT: 10,
            Model.SE4: 11,
            Model.SE68: 12,
        }
        for model, code in expected.items():
            with self.subTest(model=model):
                self.assertEqual(model.value, code)
        self.assertEqual(len(Model), len(expected))

    def test_codes_are_unique(self):
        """Test no two members share a code"""
        codes = [model.value for model in Model]
        self.assertEqual(len(codes), len(set(codes)))

    def test_from_code_known(self):
        """Test known codes map to members"""
        self.assertIs(Model.from_code(12), Model.SE68)
        self.assertIs(Model.from_code(6), Model.ADVANCED_GT)

    def test_from_code_unknown(self):
        """Test gaps and out-of-table codes are unrecognized"""
        for code in (0, 2, 8, 13, 255):
            with self.subTest(code=code):
                result = Model.from_code(code)
                self.assertIsInstance(result, UnrecognizedModel)
                self.assertEqual(result.code, code)

    def test_every_model_has_label(self):
        """Test display labels exist for all members"""
        for model in Model:
            with self.subTest(model=model):
                self.assertTrue(model.label)

    def test_unrecognized_str(self):
        """Test unrecognized model rendering"""
        self.assertEqual(str(UnrecognizedModel(42)), "Unknown model (42)")


class TestConnectionType(unittest.TestCase):
    """Test suite for ConnectionType enum"""

    def test_values(self):
        """Test string values"""
        self.assertEqual(ConnectionType.SERIAL, "serial")
        self.assertEqual(ConnectionType.TCP, "tcp")
        self.assertIs(ConnectionType("tcp"), ConnectionType.TCP)


if __name__ == "__main__":
    unittest.main()
