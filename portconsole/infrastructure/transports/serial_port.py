"""Serial port transport using pyserial."""

import logging

import serial
from serial.serialutil import SerialException

from portconsole.domain import DataHandler

logger = logging.getLogger(__name__)

DEFAULT_BAUDRATE = 115200
READ_CHUNK_SIZE = 4096


class SerialTransport:
    """Transport backed by a serial port.

    Reads are non-blocking; call ``poll`` regularly to deliver inbound
    bytes to the registered handler.
    """

    def __init__(
        self,
        port: str,
        baudrate: int = DEFAULT_BAUDRATE,
        write_timeout: float = 1.0,
    ) -> None:
        self._port = port
        self._baudrate = baudrate
        self._write_timeout = write_timeout
        self._serial: serial.Serial | None = None
        self._handler: DataHandler | None = None
        self._error = ""

    @property
    def port(self) -> str:
        return self._port

    def open(self) -> bool:
        """Open the port. Returns True on success."""
        self.close()
        try:
            self._serial = serial.Serial(
                port=self._port,
                baudrate=self._baudrate,
                timeout=0,
                write_timeout=self._write_timeout,
            )
        except SerialException as e:
            self._error = str(e)
            logger.error("Cannot open port=%s: %s", self._port, e)
            return False

        logger.info("Opened port=%s baudrate=%d", self._port, self._baudrate)
        return True

    def close(self) -> None:
        if self._serial is not None:
            try:
                self._serial.close()
            except SerialException as e:
                logger.warning("Error closing port=%s: %s", self._port, e)
            self._serial = None

    def is_connected(self) -> bool:
        return self._serial is not None and self._serial.is_open

    def set_data_handler(self, handler: DataHandler | None) -> None:
        self._handler = handler

    def write(self, data: bytes) -> int:
        if not self.is_connected():
            self._error = "Port not open"
            return -1

        try:
            return self._serial.write(data) or 0
        except SerialException as e:
            self._error = str(e)
            return -1

    def error_string(self) -> str:
        return self._error

    def poll(self) -> int:
        """Read whatever is waiting and hand it to the data handler.

        Returns:
            Number of bytes delivered.
        """
        if not self.is_connected():
            return 0

        try:
            data = self._serial.read(self._serial.in_waiting or READ_CHUNK_SIZE)
        except SerialException as e:
            # Port removed or invalid
            self._error = str(e)
            logger.error("Read failed port=%s: %s", self._port, e)
            self.close()
            return 0

        if data and self._handler is not None:
            self._handler(data)
        return len(data)
