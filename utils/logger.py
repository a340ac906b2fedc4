"""
Logger utility for the Banker's Safety Checker.

Provides console and file logging with verbosity levels.
"""

from typing import List, Optional
from datetime import datetime


class CheckerLogger:
    """
    Logger for safety check progress and verdicts.

    Format: "Pass X: P3 can execute - Work [..] -> [..]"
    """

    def __init__(self, verbose: bool = False, log_file: Optional[str] = None):
        """
        Initialize logger.

        Args:
            verbose: Enable debug output
            log_file: Optional file path for logging
        """
        self.verbose = verbose
        self.log_file = log_file
        self.file_handle = None

        if self.log_file:
            self.file_handle = open(self.log_file, 'w', encoding='utf-8')
            self._write_header()

    def _write_header(self) -> None:
        """Write log file header."""
        if self.file_handle:
            timestamp = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
            self.file_handle.write(f"Safety Check Log - {timestamp}\n")
            self.file_handle.write("="*60 + "\n\n")

    def log(self, message: str, level: str = "info") -> None:
        """
        Log a message.

        Args:
            message: Message to log
            level: Log level (info, debug, warning, error)
        """
        if level == "debug" and not self.verbose:
            return

        formatted = self._format_message(message, level)

        print(formatted)

        if self.file_handle:
            self.file_handle.write(formatted + "\n")
            self.file_handle.flush()

    def _format_message(self, message: str, level: str) -> str:
        """Format message with level prefix."""
        if level == "error":
            return f"[ERROR] {message}"
        elif level == "warning":
            return f"[WARNING] {message}"
        elif level == "debug":
            return f"[DEBUG] {message}"
        else:
            return message

    def log_pass(self, pass_number: int, work: List[int]) -> None:
        """Log the start of a scan over unfinished processes."""
        self.log(f"Pass {pass_number}: scanning with Work = {work}", "debug")

    def log_executable(
        self,
        pass_number: int,
        pid: int,
        work_before: List[int],
        work_after: List[int]
    ) -> None:
        """
        Log a process found executable and the release of its allocation.

        Args:
            pass_number: Current pass
            pid: Process index
            work_before: Work vector before release
            work_after: Work vector after release
        """
        self.log(
            f"Pass {pass_number}: P{pid} can execute - "
            f"Work {work_before} -> {work_after}",
            "debug"
        )

    def log_no_progress(self, pass_number: int, unfinished: List[int]) -> None:
        """
        Log a pass in which no process could execute.

        Args:
            pass_number: Current pass
            unfinished: Processes still waiting
        """
        pids_str = ", ".join(f"P{pid}" for pid in unfinished)
        self.log(f"Pass {pass_number}: no process can execute - blocked: [{pids_str}]", "debug")

    def log_verdict(self, is_safe: bool, sequence_str: str = "") -> None:
        """Log the final verdict on one line."""
        if is_safe:
            self.log(f"Verdict: SAFE ({sequence_str})")
        else:
            self.log("Verdict: NOT SAFE")

    def log_snapshot(self, snapshot_str: str) -> None:
        """
        Log snapshot matrices.

        Args:
            snapshot_str: Formatted snapshot
        """
        self.log(snapshot_str)

    def close(self) -> None:
        """Close log file if open."""
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None

    def __del__(self):
        """Cleanup on destruction."""
        self.close()
