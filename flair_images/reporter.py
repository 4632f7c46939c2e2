"""
Reporter - Human-readable listings of flair images.
"""

import logging
import sys
from typing import Iterable, Optional, Set, TextIO


class Reporter:
    """
    Prints catalog listings and combines them into summaries.

    Orphaned images are on disk but unused; missing images are
    referenced by flair but have no complete variant set.
    """

    def __init__(
        self,
        output: Optional[TextIO] = None,
        logger: Optional[logging.Logger] = None
    ):
        """
        Initialize reporter.

        Args:
            output: Output stream (default: stdout)
            logger: Optional logger instance
        """
        self.output = output or sys.stdout
        self.logger = logger or logging.getLogger(__name__)

    def _print(self, text: str = "") -> None:
        """Print to output stream."""
        print(text, file=self.output)

    @staticmethod
    def orphaned(available: Set[str], used: Set[str]) -> Set[str]:
        return available - used

    @staticmethod
    def missing(available: Set[str], used: Set[str]) -> Set[str]:
        return used - available

    def report_list(self, title: str, names: Iterable[str]) -> None:
        """Print a titled, sorted list of image names."""
        names = sorted(names)
        self._print(f"{title} ({len(names)})")
        self._print("-" * 40)
        if not names:
            self._print("  (none)")
        for name in names:
            self._print(f"  {name}")

    def report_summary(self, available: Set[str], used: Set[str]) -> None:
        """Print counts of available, used, orphaned and missing images."""
        orphaned = self.orphaned(available, used)
        missing = self.missing(available, used)

        self._print("=" * 40)
        self._print("FLAIR IMAGE SUMMARY")
        self._print("=" * 40)
        self._print(f"  Available:   {len(available)}")
        self._print(f"  Used:        {len(used)}")
        self._print(f"  Orphaned:    {len(orphaned)}")
        self._print(f"  Missing:     {len(missing)}")

        if missing:
            self._print()
            self._print("Referenced by flair but not on disk:")
            for name in sorted(missing):
                self._print(f"  {name}")
