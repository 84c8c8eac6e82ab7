import logging
import os
import signal
import subprocess

from .exceptions import ProcessError

default_logger = logging.getLogger(__name__)

GUARDED_SIGNALS = (signal.SIGINT, signal.SIGTERM)


class InterruptGuard:
    """Context manager that ends the whole program when a guarded signal arrives.

    The previous handlers are put back when the block is left, whichever
    way that happens. The program exits with status 128 + signal number,
    so Ctrl-C gives 130.
    """

    def __init__(self, exit_func=os._exit, signals=GUARDED_SIGNALS, logger=None):
        self.exit_func = exit_func
        self.signals = signals
        self.logger = logger or default_logger
        self.previous = {}

    def _handle(self, signum, frame):
        self.logger.debug(f"Caught signal {signum}, exiting")
        self.exit_func(128 + signum)

    def __enter__(self):
        for sig in self.signals:
            self.previous[sig] = signal.signal(sig, self._handle)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        while self.previous:
            sig, handler = self.previous.popitem()
            signal.signal(sig, handler)


class ProcessRunner:
    def __init__(self, logger=None, exit_func=os._exit):
        self.logger = logger or default_logger
        self.exit_func = exit_func

    def run(self, executable, *args):
        """Run ``executable`` attached to this terminal and wait for it to finish."""
        command = [executable, *args]
        self.logger.debug(f"Running {executable}")
        try:
            proc = subprocess.Popen(command)
        except OSError as e:
            raise ProcessError(command, reason=e)

        with InterruptGuard(exit_func=self.exit_func, logger=self.logger):
            returncode = proc.wait()

        if returncode != 0:
            raise ProcessError(command, returncode=returncode)
