"""
CLI Commands Module

- connect: Port discovery, connection test, controller and device information
- mount: Alignment and GOTO state
- time: Hand controller date and time
- location: Observer location
"""
