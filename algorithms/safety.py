"""
Safety Algorithm (Banker's Algorithm) for the Safety Checker.

Decides whether a resource-allocation snapshot is in a safe state and
produces the safe sequence witnessing it.
"""

import numpy as np
from typing import List, Optional, Sequence, Tuple

from models.snapshot import AllocationSnapshot
from models.result import SafetyResult, format_sequence
from analysis.events import SafetyEvent, SafetyTrace, TraceEventType
from utils.logger import CheckerLogger


def compute_need(allocation, max_need) -> np.ndarray:
    """
    Compute the Need matrix.

    Need[i][j] = Max[i][j] - Allocation[i][j]

    Args:
        allocation: [P][R] current allocation
        max_need: [P][R] declared maximum demand

    Returns:
        [P][R] integer array of remaining need
    """
    return np.asarray(max_need, dtype=np.int64) - np.asarray(allocation, dtype=np.int64)


def run_safety_check(
    snapshot: AllocationSnapshot,
    record_trace: bool = False,
    logger: Optional[CheckerLogger] = None
) -> SafetyResult:
    """
    Check if a snapshot is in a safe state using Banker's Algorithm.

    Algorithm:
    1. Need = Max - Allocation; Work = Available; Finish = [False] * P
    2. Scan unfinished processes in index order; whenever Need[i] <= Work,
       Finish[i] = True, Work += Allocation[i], append i to the sequence.
       Resources released by P[i] are visible to later processes in the
       same scan.
    3. Repeat the scan until all processes finish (SAFE) or a whole scan
       finds nothing executable (UNSAFE)

    Time Complexity: O(P²×R)

    Args:
        snapshot: Snapshot to check (validated, never modified)
        record_trace: Record each pass and release in result.trace
        logger: Optional logger narrating progress at debug level

    Returns:
        SafetyResult with verdict, sequence and final Work vector

    Raises:
        InputError: If the snapshot violates its invariants
    """
    snapshot.validate()

    # Step 1: Need = Max - Allocation (recomputed per check, never stored)
    need = snapshot.need_matrix
    allocation = snapshot.allocation_matrix
    num_processes = snapshot.num_processes

    # Step 2: Initialize Work and Finish vectors
    # Work = copy of Available (prevents modification of the snapshot)
    work = snapshot.available_vector.copy()
    finish = np.zeros(num_processes, dtype=bool)
    safe_sequence = []
    trace = SafetyTrace() if record_trace else None

    # Step 3: Scan unfinished processes until a full pass makes no progress
    passes = 0
    while len(safe_sequence) < num_processes:
        passes += 1
        found = False

        if trace is not None:
            trace.add(SafetyEvent(passes, TraceEventType.PASS_STARTED, work_before=work.tolist()))
        if logger:
            logger.log_pass(passes, work.tolist())

        for i in range(num_processes):
            if finish[i]:
                continue

            # Need[i] <= Work for all resource types
            if np.all(need[i] <= work):
                work_before = work.tolist()
                # Process can finish: later processes in this pass see its release
                work += allocation[i]
                finish[i] = True
                safe_sequence.append(i)
                found = True

                if trace is not None:
                    trace.add(SafetyEvent(
                        passes,
                        TraceEventType.EXECUTABLE,
                        process_id=i,
                        work_before=work_before,
                        work_after=work.tolist()
                    ))
                if logger:
                    logger.log_executable(passes, i, work_before, work.tolist())

        # Nothing executable in a whole pass: UNSAFE
        if not found:
            break

    # Step 4: SAFE only if every process finished
    unfinished = [i for i in range(num_processes) if not finish[i]]
    is_safe = not unfinished

    if trace is not None:
        if is_safe:
            trace.add(SafetyEvent(
                passes,
                TraceEventType.COMPLETED,
                work_before=work.tolist(),
                message=f"all processes finished: {format_sequence(safe_sequence)}"
            ))
        else:
            trace.add(SafetyEvent(
                passes,
                TraceEventType.NO_PROGRESS,
                work_before=work.tolist(),
                message="blocked: " + ", ".join(f"P{pid}" for pid in unfinished)
            ))
    if logger and not is_safe:
        logger.log_no_progress(passes, unfinished)

    return SafetyResult(
        is_safe=is_safe,
        sequence=safe_sequence,
        work=work,
        unfinished=unfinished,
        passes=passes,
        trace=trace
    )


def check_safety(allocation, max_need, available) -> Tuple[bool, List[int]]:
    """
    Run the safety check on plain matrices.

    Args:
        allocation: [P][R] current allocation
        max_need: [P][R] declared maximum demand
        available: [R] free instances

    Returns:
        Tuple of (is_safe, safe sequence or witnessed prefix if unsafe)

    Raises:
        InputError: If the matrices are malformed or inconsistent
    """
    snapshot = AllocationSnapshot(allocation, max_need, available)
    return run_safety_check(snapshot).as_tuple()


def is_safe_state(snapshot: AllocationSnapshot) -> Tuple[bool, Optional[List[int]]]:
    """
    Check a snapshot, returning the sequence only when it is safe.

    Returns:
        Tuple of (is_safe, safe_sequence if exists else None)
    """
    result = run_safety_check(snapshot)
    if result.is_safe:
        return True, result.sequence
    return False, None


def verify_safe_sequence(snapshot: AllocationSnapshot, sequence: Sequence[int]) -> bool:
    """
    Replay a sequence and confirm it witnesses a safe state.

    The sequence must be a permutation of all process indices, and each
    process's Need must fit in Work at the moment it is scheduled.

    Args:
        snapshot: Snapshot the sequence was produced for
        sequence: Candidate order of process indices

    Returns:
        True if the sequence is a valid safe sequence
    """
    if sorted(sequence) != list(range(snapshot.num_processes)):
        return False

    need = snapshot.need_matrix
    work = snapshot.available_vector.copy()

    # Replay in the given order, releasing each allocation as it finishes
    for pid in sequence:
        if not np.all(need[pid] <= work):
            return False
        work += snapshot.allocation_matrix[pid]

    return True
