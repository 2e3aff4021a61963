"""
Verbose stderr logging and the collected-warnings diagnostics channel.
"""

import sys
from datetime import datetime
from typing import List


class VerboseLog:
    """Prints timestamped progress to stderr when verbose and collects warnings."""

    def __init__(self, component: str = "Parser", verbose: bool = False):
        self.component = component
        self.verbose = verbose
        self.warnings: List[str] = []

    def _timestamp(self) -> str:
        return datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]

    def log(self, message: str):
        """Prints message to stderr only if verbose mode is enabled."""
        if self.verbose:
            print(f"[{self._timestamp()} {self.component} VERBOSE] {message}", file=sys.stderr)

    def warn(self, message: str):
        """Records a soft omission. Output is never affected by a warning."""
        if message in self.warnings:
            return
        self.warnings.append(message)
        self.log(f"Warning: {message}")

    def error(self, message: str):
        """Prints an actual error regardless of verbosity."""
        print(f"ERROR: {message}", file=sys.stderr)

    def reset(self):
        self.warnings = []
