"""
Input Loader for the Banker's Safety Checker.

Loads and validates snapshot input files in two forms:
- text: whitespace-separated integers (allocation, max, available)
- JSON: object with named matrices
"""

import json
from typing import Any, Dict, List, Optional
from pathlib import Path

from models.snapshot import AllocationSnapshot, InputError

__all__ = [
    'InputError',
    'load_input',
    'parse_text',
    'parse_json',
    'get_input_description',
]


def load_input(
    file_path: str,
    num_processes: Optional[int] = None,
    num_resources: Optional[int] = None,
    resource_names: Optional[List[str]] = None
) -> AllocationSnapshot:
    """
    Load a snapshot from an input file.

    Files with a .json suffix are parsed as JSON, anything else as
    whitespace-separated integers.

    Args:
        file_path: Path to input file
        num_processes: Configured process count (None = read from input)
        num_resources: Configured resource-type count (None = read from input)
        resource_names: Optional display labels for resource types

    Returns:
        Validated AllocationSnapshot

    Raises:
        InputError: If file cannot be loaded or is invalid
    """
    path = Path(file_path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise InputError(f"Input file not found: {file_path}")
    except (OSError, UnicodeDecodeError) as e:
        raise InputError(f"Could not read input file {file_path}: {e}")

    if path.suffix.lower() == '.json':
        try:
            data = json.loads(content)
        except json.JSONDecodeError as e:
            raise InputError(f"Invalid JSON in input file: {e}")
        return parse_json(data, num_processes, num_resources, resource_names)

    return parse_text(content, num_processes, num_resources, resource_names)


def _tokenize(text: str) -> List[int]:
    """
    Split text into integers, ignoring '#' comments.

    Raises:
        InputError: On a token that is not an integer
    """
    values = []
    for line_no, line in enumerate(text.splitlines(), start=1):
        line = line.split('#', 1)[0]
        for token in line.split():
            try:
                values.append(int(token))
            except ValueError:
                raise InputError(f"Line {line_no}: non-numeric token '{token}'")
    return values


def _take(values: List[int], start: int, count: int, what: str) -> List[int]:
    """Take count values starting at start, or fail if the input is truncated."""
    if start + count > len(values):
        raise InputError(
            f"Input truncated while reading {what}: "
            f"expected {count} values, found {max(len(values) - start, 0)}"
        )
    return values[start:start + count]


def _check_dimension(value: Any, name: str) -> int:
    """Validate a process or resource count."""
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InputError(f"{name} must be a positive integer, got {value!r}")
    return value


def parse_text(
    text: str,
    num_processes: Optional[int] = None,
    num_resources: Optional[int] = None,
    resource_names: Optional[List[str]] = None
) -> AllocationSnapshot:
    """
    Parse the whitespace-separated integer form.

    With both dimensions configured, the text holds exactly the allocation
    matrix, the max matrix and the available vector. Without dimensions,
    the first two integers are the process and resource-type counts.

    Args:
        text: Input contents
        num_processes: Configured process count
        num_resources: Configured resource-type count
        resource_names: Optional display labels

    Returns:
        Validated AllocationSnapshot

    Raises:
        InputError: If the text is truncated, non-numeric or inconsistent
    """
    if (num_processes is None) != (num_resources is None):
        raise InputError("Process and resource counts must be configured together")

    values = _tokenize(text)
    pos = 0

    if num_processes is None:
        header = _take(values, 0, 2, "dimension header")
        num_processes = _check_dimension(header[0], "Process count")
        num_resources = _check_dimension(header[1], "Resource count")
        pos = 2
    else:
        _check_dimension(num_processes, "Process count")
        _check_dimension(num_resources, "Resource count")

    cells = num_processes * num_resources

    flat_alloc = _take(values, pos, cells, "allocation matrix")
    pos += cells
    flat_max = _take(values, pos, cells, "max matrix")
    pos += cells
    available = _take(values, pos, num_resources, "available vector")
    pos += num_resources

    if pos != len(values):
        raise InputError(
            f"Unexpected trailing data: {len(values) - pos} extra values after "
            f"available vector (expected P={num_processes}, R={num_resources})"
        )

    allocation = [flat_alloc[i * num_resources:(i + 1) * num_resources] for i in range(num_processes)]
    max_need = [flat_max[i * num_resources:(i + 1) * num_resources] for i in range(num_processes)]

    return AllocationSnapshot.from_lists(allocation, max_need, available, resource_names)


def parse_json(
    data: Dict,
    num_processes: Optional[int] = None,
    num_resources: Optional[int] = None,
    resource_names: Optional[List[str]] = None
) -> AllocationSnapshot:
    """
    Parse the JSON object form.

    Expected fields: 'allocation', 'max_need' (or 'max'), 'available',
    optionally 'resource_names' and 'description'.

    Args:
        data: Decoded JSON object
        num_processes: Configured process count (must match if given)
        num_resources: Configured resource-type count (must match if given)
        resource_names: Display labels, overriding any in the data

    Returns:
        Validated AllocationSnapshot

    Raises:
        InputError: If fields are missing or inconsistent
    """
    if not isinstance(data, dict):
        raise InputError("JSON input must be an object")

    if 'allocation' not in data:
        raise InputError("Input missing 'allocation' field")
    if 'max_need' not in data and 'max' not in data:
        raise InputError("Input missing 'max_need' field")
    if 'available' not in data:
        raise InputError("Input missing 'available' field")

    max_need = data['max_need'] if 'max_need' in data else data['max']
    names = resource_names or data.get('resource_names')
    if names is not None and (
        not isinstance(names, list) or not all(isinstance(n, str) for n in names)
    ):
        raise InputError("'resource_names' must be a list of strings")

    snapshot = AllocationSnapshot.from_lists(data['allocation'], max_need, data['available'], names)

    if num_processes is not None and snapshot.num_processes != num_processes:
        raise InputError(
            f"Input has {snapshot.num_processes} processes, configured for {num_processes}"
        )
    if num_resources is not None and snapshot.num_resources != num_resources:
        raise InputError(
            f"Input has {snapshot.num_resources} resource types, configured for {num_resources}"
        )

    return snapshot


def get_input_description(file_path: str) -> str:
    """
    Get description from a JSON input file without full loading.

    Args:
        file_path: Path to input file

    Returns:
        Description string, or empty string if not present
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (OSError, ValueError):
        return ''
    if not isinstance(data, dict):
        return ''
    return data.get('description', '')
