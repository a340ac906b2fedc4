"""
Safety Result model for the Banker's Safety Checker.

Structured verdict returned by the safety algorithm, kept separate from
any console output so the checker can run headless.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from analysis.events import SafetyTrace


def format_sequence(sequence: List[int]) -> str:
    """Render a process sequence as 'P1 -> P3 -> P0'."""
    return " -> ".join(f"P{pid}" for pid in sequence)


@dataclass
class SafetyResult:
    """
    Outcome of one safety check.

    Attributes:
        is_safe: True if every process can finish in some order
        sequence: Processes in the order they were found executable
            (complete when safe, the witnessed prefix when unsafe)
        work: Work vector [R] when the simulation stopped
        unfinished: Processes that never became executable (empty when safe)
        passes: Number of scans over the unfinished processes
        trace: Recorded simulation steps, if requested
    """
    is_safe: bool
    sequence: List[int] = field(default_factory=list)
    work: Optional[np.ndarray] = None
    unfinished: List[int] = field(default_factory=list)
    passes: int = 0
    trace: Optional[SafetyTrace] = None

    def as_tuple(self):
        """Return the (is_safe, sequence) pair."""
        return self.is_safe, list(self.sequence)

    def display(self) -> str:
        """Format the verdict for display."""
        output = ["\n" + "="*60]

        if self.is_safe:
            output.append("RESULT: SYSTEM IS SAFE")
            output.append("="*60)
            output.append(f"\nSafe Sequence Found: < {format_sequence(self.sequence)} >")
            output.append("Processes can execute in this order without deadlock.")
        else:
            output.append("RESULT: SYSTEM IS NOT SAFE")
            output.append("="*60)
            blocked = ", ".join(f"P{pid}" for pid in self.unfinished)
            output.append(f"\nNo process among [{blocked}] can execute with current resources.")
            output.append("The system may enter a deadlock state.")

        return "\n".join(output)
