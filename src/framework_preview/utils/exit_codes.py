"""Centralized exit-code contract for all CLI commands.

Code  Meaning
----  -------
  0   Success
  1   Violation: a self check case failed
  2   Error: usage error, missing file, storage failure
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
