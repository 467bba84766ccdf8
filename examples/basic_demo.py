"""
Basic demonstration of the NexStar hand controller client

This script walks through the read-only and clock operations:
- Picking a serial port
- Ping, model and firmware versions
- Motor, GPS and RTC firmware (reporting devices that are not installed)
- Setting the clock from the system time
- Reading location, alignment and GOTO state
"""

import sys
from datetime import UTC, datetime

from serial.tools import list_ports

from nexstar_serial import DeviceAbsent, DevicePresent, Model, NexStarTelescope, NexstarError, TelescopeConfig
from nexstar_serial.api.core.enums import Device


def choose_port() -> str | None:
    ports = sorted(port.device for port in list_ports.comports())

    if not ports:
        print("No serial port(s) found, exiting.")
        return None

    if len(ports) == 1:
        return ports[0]

    print("Serial ports found:")
    for index, name in enumerate(ports):
        print(f"{index}. {name}")
    return ports[int(input("Select a serial port: "))]


def main() -> int:
    """Main demo function"""
    port = choose_port()
    if port is None:
        return 1

    print(f"Connecting using serial port {port}...")

    try:
        with NexStarTelescope(TelescopeConfig(port=port)) as telescope:
            print(f"Ping: {telescope.ping()}")

            telescope.cancel_goto()

            model = telescope.get_model()
            print(f"Model: {model.label if isinstance(model, Model) else model}")
            print(f"Version: {telescope.get_version()}")

            for device in Device:
                match telescope.query_device_version(device):
                    case DevicePresent(version=version):
                        print(f"{device.label} Version: {version}")
                    case DeviceAbsent():
                        print(f"{device.label} not installed.")
                    case failed:
                        print(f"{device.label} query failed: {failed.error}")

            print("Setting time using system time...")
            telescope.set_time(datetime.now(UTC))
            print(f"Date/Time: {telescope.get_time()}")

            location = telescope.get_location()
            print(f"Location (Decimal): {location}")
            print(f"Location (DMS): {location.to_dms_string()}")

            print(f"Is Aligned: {telescope.is_aligned()}")
            print(f"GOTO in Progress: {telescope.is_goto_in_progress()}")

    except NexstarError as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
