"""
================================================================================
Logger
================================================================================
Author      : Breno Farias da Silva
Created     : 2026-03-18
Description :
    This module provides the Logger class, a file-like object that duplicates
    everything written to it into the terminal and into a log file. Assign an
    instance to sys.stdout and sys.stderr to keep a log of a whole run.

    ANSI color codes are kept in the terminal and stripped from the log file.

Usage:
    logger = Logger("./Logs/main.log", clean=True)
    sys.stdout = logger
    sys.stderr = logger
"""


import os  # Directory creation
import re  # ANSI escape sequence removal
import sys  # Original terminal streams


# Regex Constants:
ANSI_ESCAPE_PATTERN = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")  # Terminal color and cursor sequences


# Classes Definitions:

class Logger:
    """
    Tees terminal output into a log file.

    :return: None
    """


    def __init__(self, logfile_path, clean=False):
        """
        Opens the log file.

        :param logfile_path: Path of the log file. Its directory is created if needed.
        :param clean: Truncate the log file when True, append to it otherwise
        :return: None
        """

        self.logfile_path = logfile_path  # Path of the log file
        log_directory = os.path.dirname(logfile_path)  # Directory of the log file
        if log_directory:  # Relative file names have no directory part
            os.makedirs(log_directory, exist_ok=True)

        self.terminal = sys.__stdout__  # The real terminal
        self.logfile = open(logfile_path, "w" if clean else "a", encoding="utf-8")  # Log file handle


    def write(self, message):
        """
        Writes a message to the terminal and, without colors, to the log file.

        :param message: Text to write
        :return: None
        """

        if self.terminal is not None:  # Detached processes have no terminal
            self.terminal.write(message)
        self.logfile.write(ANSI_ESCAPE_PATTERN.sub("", message))  # Plain text in the file
        self.logfile.flush()  # Keep the log current if the run crashes


    def flush(self):
        """
        Flushes both outputs.

        :return: None
        """

        if self.terminal is not None:
            self.terminal.flush()
        self.logfile.flush()


    def isatty(self):
        """
        Whether the terminal is interactive.

        :return: True if the terminal is a TTY
        """

        return self.terminal is not None and self.terminal.isatty()


    def close(self):
        """
        Closes the log file.

        :return: None
        """

        self.logfile.close()
