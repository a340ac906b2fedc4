"""
Allocation Snapshot model for the Banker's Safety Checker.

Holds the matrices and vectors describing one resource-allocation snapshot
and derives the Need matrix used by the safety algorithm.
"""

import string
import numpy as np
from typing import List, Optional, Sequence
from dataclasses import dataclass, field


class InputError(Exception):
    """Exception raised when snapshot data is missing, malformed or inconsistent."""
    pass


def default_resource_names(num_resources: int) -> List[str]:
    """
    Build default resource labels: A, B, C, ... then R26, R27, ...

    Args:
        num_resources: Number of resource types

    Returns:
        List of labels, one per resource type
    """
    letters = string.ascii_uppercase
    return [letters[j] if j < len(letters) else f"R{j}" for j in range(num_resources)]


INT64_MAX = int(np.iinfo(np.int64).max)


def _contains_bool(values) -> bool:
    """Check nested lists/tuples for booleans, which numpy would upcast to 0/1."""
    if isinstance(values, (bool, np.bool_)):
        return True
    if isinstance(values, (list, tuple)):
        return any(_contains_bool(v) for v in values)
    return False


def _as_int_array(values, name: str, ndim: int) -> np.ndarray:
    """Convert values to an integer numpy array of the given dimensionality."""
    if _contains_bool(values):
        raise InputError(f"{name} must contain integers only (got a boolean)")

    try:
        array = np.array(values)
    except (TypeError, ValueError) as e:
        raise InputError(f"{name} is not a rectangular array of integers: {e}")

    if array.ndim != ndim:
        raise InputError(f"{name} must be {ndim}-dimensional, got shape {array.shape}")

    # Python ints beyond 64 bits land in an object array
    out_of_range = (
        array.dtype == object
        and all(isinstance(v, int) and not isinstance(v, bool) for v in array.flat)
    ) or (
        array.size
        and np.issubdtype(array.dtype, np.unsignedinteger)
        and int(array.max()) > INT64_MAX
    )
    if out_of_range:
        raise InputError(f"{name} contains a value out of range for 64-bit integers")
    if array.size and not np.issubdtype(array.dtype, np.integer):
        raise InputError(f"{name} must contain integers only (got dtype {array.dtype})")

    return array.astype(np.int64)


@dataclass
class AllocationSnapshot:
    """
    A resource-allocation snapshot checked by Banker's Algorithm.

    Attributes:
        allocation_matrix: [P][R] Resources currently held by each process
        max_demand_matrix: [P][R] Maximum resource need declared by each process
        available_vector: [R] Free resource instances by type
        resource_names: [R] Display labels for resource types

    Invariant:
        0 <= allocation_matrix[i][j] <= max_demand_matrix[i][j]
    """
    allocation_matrix: np.ndarray
    max_demand_matrix: np.ndarray
    available_vector: np.ndarray
    resource_names: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Copy inputs into integer arrays so callers' data is never mutated."""
        self.allocation_matrix = _as_int_array(self.allocation_matrix, "Allocation matrix", 2)
        self.max_demand_matrix = _as_int_array(self.max_demand_matrix, "Max matrix", 2)
        self.available_vector = _as_int_array(self.available_vector, "Available vector", 1)

        if not self.resource_names:
            self.resource_names = default_resource_names(len(self.available_vector))
        else:
            self.resource_names = list(self.resource_names)

    @classmethod
    def from_lists(
        cls,
        allocation: Sequence[Sequence[int]],
        max_need: Sequence[Sequence[int]],
        available: Sequence[int],
        resource_names: Optional[List[str]] = None
    ) -> "AllocationSnapshot":
        """
        Build and validate a snapshot from plain nested lists.

        Raises:
            InputError: If the data violates any snapshot invariant
        """
        snapshot = cls(allocation, max_need, available, resource_names or [])
        snapshot.validate()
        return snapshot

    @property
    def num_processes(self) -> int:
        """Number of processes in the snapshot."""
        return self.allocation_matrix.shape[0]

    @property
    def num_resources(self) -> int:
        """Number of resource types in the snapshot."""
        return len(self.available_vector)

    @property
    def need_matrix(self) -> np.ndarray:
        """
        Get need matrix [P][R].
        Computed as: Need = Max - Allocation
        """
        return self.max_demand_matrix - self.allocation_matrix

    @property
    def total_vector(self) -> np.ndarray:
        """Total instances of each resource type: allocated + available."""
        return self.allocation_matrix.sum(axis=0) + self.available_vector

    def validate(self) -> None:
        """
        Check shapes and value invariants of the snapshot.

        Raises:
            InputError: On empty dimensions, mismatched shapes, negative
                values or allocation exceeding max demand
        """
        num_processes, num_resources = self.num_processes, self.num_resources

        if num_processes <= 0:
            raise InputError("Snapshot must contain at least one process")
        if num_resources <= 0:
            raise InputError("Snapshot must contain at least one resource type")

        expected = (num_processes, num_resources)
        if self.allocation_matrix.shape != expected:
            raise InputError(
                f"Allocation matrix shape {self.allocation_matrix.shape} "
                f"does not match {expected}"
            )
        if self.max_demand_matrix.shape != expected:
            raise InputError(
                f"Max matrix shape {self.max_demand_matrix.shape} "
                f"does not match allocation shape {expected}"
            )
        if len(self.resource_names) != num_resources:
            raise InputError(
                f"{len(self.resource_names)} resource names given "
                f"for {num_resources} resource types"
            )

        for name, array in (
            ("Allocation matrix", self.allocation_matrix),
            ("Max matrix", self.max_demand_matrix),
            ("Available vector", self.available_vector),
        ):
            if (array < 0).any():
                raise InputError(f"{name} contains negative values")

        # Work grows up to the total vector, so totals must fit in int64
        for j in range(num_resources):
            total = sum(int(v) for v in self.allocation_matrix[:, j]) + int(self.available_vector[j])
            if total > INT64_MAX:
                raise InputError(
                    f"Total instances of {self.resource_names[j]} ({total}) "
                    f"out of range for 64-bit integers"
                )

        # Report the first offending entry in row-major order
        over = np.argwhere(self.allocation_matrix > self.max_demand_matrix)
        if len(over):
            i, j = over[0]
            raise InputError(
                f"P{i}: allocation of {self.resource_names[j]} "
                f"({self.allocation_matrix[i][j]}) exceeds max demand "
                f"({self.max_demand_matrix[i][j]})"
            )

    def _matrix_lines(self, title: str, matrix: np.ndarray) -> List[str]:
        """Render one [P][R] matrix with resource headers and process labels."""
        width = max([3] + [len(str(v)) + 1 for v in matrix.flat] + [len(n) + 1 for n in self.resource_names])
        lines = [f"\n{title}:"]
        lines.append("     " + "".join(f"{name:>{width}}" for name in self.resource_names))
        lines.append("   " + "-" * (2 + width * self.num_resources))
        for i in range(self.num_processes):
            row = "".join(f"{value:>{width}}" for value in matrix[i])
            lines.append(f"P{i:<2}| {row}")
        return lines

    def _vector_line(self, title: str, vector: np.ndarray) -> str:
        """Render one [R] vector as name=value pairs."""
        pairs = ", ".join(f"{name}={value}" for name, value in zip(self.resource_names, vector))
        return f"{title}: [{pairs}]"

    def display(self) -> str:
        """
        Generate readable string representation of the snapshot.

        Returns:
            Formatted string showing all matrices and vectors
        """
        output = []
        output.append("\n" + "="*60)
        output.append("CURRENT SYSTEM STATE")
        output.append("="*60)
        output.append(f"Processes: {self.num_processes}, Resource types: {self.num_resources}")

        output.extend(self._matrix_lines("Allocation Matrix", self.allocation_matrix))
        output.extend(self._matrix_lines("Max Matrix", self.max_demand_matrix))
        output.extend(self._matrix_lines("Need Matrix (Max - Allocation)", self.need_matrix))

        output.append("")
        output.append(self._vector_line("Available Resources", self.available_vector))
        output.append(self._vector_line("Total Instances", self.total_vector))

        output.append("="*60)
        return "\n".join(output)
