"""
Trace Event Model for the Banker's Safety Checker.

Defines event types for recording each pass of the safety simulation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional


class TraceEventType(Enum):
    """Types of events recorded during a safety check."""
    PASS_STARTED = "pass_started"
    EXECUTABLE = "executable"
    NO_PROGRESS = "no_progress"
    COMPLETED = "completed"


@dataclass
class SafetyEvent:
    """
    Represents a single step of the safety simulation.

    Attributes:
        pass_number: Scan in which the event occurred (1-based)
        event_type: Type of event
        process_id: Process involved (-1 for pass-wide events)
        work_before: Work vector before the event
        work_after: Work vector after the event (release of allocation)
        message: Human-readable description
    """
    pass_number: int
    event_type: TraceEventType
    process_id: int = -1
    work_before: Optional[List[int]] = None
    work_after: Optional[List[int]] = None
    message: str = ""

    def __str__(self) -> str:
        """Format event for logging."""
        base = f"Pass {self.pass_number}"

        if self.event_type == TraceEventType.PASS_STARTED:
            return f"{base}: scanning with Work = {self.work_before}"
        elif self.event_type == TraceEventType.EXECUTABLE:
            return (
                f"{base}: P{self.process_id} can execute - "
                f"Work {self.work_before} -> {self.work_after}"
            )
        elif self.event_type == TraceEventType.NO_PROGRESS:
            return f"{base}: no process can execute ({self.message})"
        else:
            return f"{base}: {self.message}"


@dataclass
class SafetyTrace:
    """Collection of safety simulation events."""
    events: list = None

    def __post_init__(self):
        if self.events is None:
            self.events = []

    def add(self, event: SafetyEvent) -> None:
        """Add an event to the trace."""
        self.events.append(event)

    def get_events_by_type(self, event_type: TraceEventType) -> list:
        """Get all events of a specific type."""
        return [e for e in self.events if e.event_type == event_type]

    def get_events_by_pass(self, pass_number: int) -> list:
        """Get all events from a specific pass."""
        return [e for e in self.events if e.pass_number == pass_number]

    def work_history(self) -> List[List[int]]:
        """Work vector after each executable process, starting from the initial Work."""
        history = []
        for event in self.events:
            if event.event_type == TraceEventType.PASS_STARTED and not history:
                history.append(list(event.work_before))
            elif event.event_type == TraceEventType.EXECUTABLE:
                history.append(list(event.work_after))
        return history

    def display(self) -> str:
        """Format all events for display."""
        return "\n".join(str(event) for event in self.events)
