"""
Structured logging for codec operations.

Every codec event is written as a single fixed-column line through the
standard logging module, on the "b64codec" logger. The library itself never
configures handlers on import; applications either configure logging
themselves or call Logger.configure_logger() to write to a log file.

Log Format:
    | Timestamp          | Level   | Event       | Op  | Size     | Data
    Example:
    [!] 2024-01-01T12:00:00Z | WARNING | DECODE_FAIL | DEC | 12       | Invalid base64 symbol 'T' at posi

Environment Variables (a .env file is honoured):
    PRINT_CODEC_LOGS: "true"/"false" - Echo log lines to the console
    B64CODEC_LOG_FILE: Path of the log file used by configure_logger()
"""

import logging
from datetime import datetime, timezone
from dotenv import load_dotenv
import os

LOGGER_NAME = 'b64codec'
DEFAULT_LOG_FILE = 'b64codec.log'
HEADER = f"  | {'Timestamp':<20} | {'Level':<7} | {'Event':<11} | {'Op':<3} | {'Size':<8} | {'Data'}\n"
HEADER += '~'*len(HEADER)

logging.getLogger(LOGGER_NAME).addHandler(logging.NullHandler())

class Level:
    """Log level constants for consistent level naming."""
    LEVEL_DEBUG = 'DEBUG'
    LEVEL_INFO = 'INFO'
    LEVEL_WARNING = 'WARNING'
    LEVEL_ERROR = 'ERROR'

class Event:
    """
    Event type constants for codec logging.

    ENCODE/DECODE - Successful operations
    DECODE_FAIL - Input rejected by the decoder
    """
    ENCODE = 'ENCODE'
    DECODE = 'DECODE'
    DECODE_FAIL = 'DECODE_FAIL'


class Logger:
    """
    Structured logger for codec operations.

    Features:
    - Configurable console output
    - Fixed-column log format
    - Optional log file destination
    """

    def __init__(self, operation='N/A'):
        """
        Initialize logger for one codec operation.

        Args:
            operation: Short operation tag shown in the Op column (default: 'N/A')
        """
        self.operation = operation
        self.logger = logging.getLogger(LOGGER_NAME)
        load_dotenv()
        self.LOG_TO_CONSOLE = os.getenv("PRINT_CODEC_LOGS", "false").lower() == "true"
        self.log_file = os.getenv("B64CODEC_LOG_FILE", DEFAULT_LOG_FILE)

    def configure_logger(self):
        """
        Attach a file handler for codec events.

        - Creates the log file with a column header if it doesn't exist
        - Enables DEBUG records on the codec logger
        """
        if not os.path.exists(self.log_file) or os.path.getsize(self.log_file) == 0:
            with open(self.log_file, 'w') as log_file:
                log_file.write(HEADER + '\n')

        if self.LOG_TO_CONSOLE:
            print(HEADER)

        file_handler = logging.FileHandler(self.log_file, mode='a')
        file_handler.setFormatter(logging.Formatter('%(message)s'))
        self.logger.addHandler(file_handler)
        self.logger.setLevel(logging.DEBUG)
        return file_handler

    def log_codec_event(self, level, event, size, message='N/A'):
        """
        Log a codec event with consistent formatting.

        Args:
            level: Log level from Level class
            event: Event type from Event class
            size: Length of the operation's input
            message: Additional event information (default: 'N/A')

        Symbols:
            [.] Debug
            [-] Info
            [!] Warning
            [x] Error
        """
        level_symbol = {
            Level.LEVEL_DEBUG: "[.]",
            Level.LEVEL_INFO: "[-]",
            Level.LEVEL_WARNING: "[!]",
            Level.LEVEL_ERROR: "[x]"
        }.get(level.upper(), "[-]")

        log_level = getattr(logging, level.upper(), logging.INFO)
        if not self.logger.isEnabledFor(log_level) and not self.LOG_TO_CONSOLE:
            return

        timestamp = datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%SZ')
        message = message.replace('\n', '')
        log_message = f"{level_symbol} {timestamp:<20} | {level:<7} | {event:<11} | {self.operation:<3} | {size:<8} | {message:.40s}"
        self.logger.log(log_level, log_message)

        if self.LOG_TO_CONSOLE:
            print(log_message)
