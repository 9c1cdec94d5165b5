from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)


class Journal:
    """
    In-memory record of what the facade and its subsystems did.

    Every line is also forwarded to the logging module, so the demo prints
    the same thing the tests assert on.
    """

    def __init__(self) -> None:
        self.lines: List[str] = []

    def log(self, message: str) -> None:
        self.lines.append(message)
        logger.info(message)

    def matching(self, needle: str) -> List[str]:
        return [line for line in self.lines if needle in line]
