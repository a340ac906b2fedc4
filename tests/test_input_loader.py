"""
Input Loader Tests

Tests text and JSON input parsing and every InputError path.
"""

import sys
import json
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from utils.input_loader import (
    InputError,
    get_input_description,
    load_input,
    parse_json,
    parse_text,
)


SCENARIOS_DIR = project_root / "scenarios"

TEXTBOOK_BODY = """
0 1 0
2 0 0
3 0 2
2 1 1
0 0 2
7 5 3
3 2 2
9 0 2
2 2 2
4 3 3
3 3 2
"""


def expect_input_error(func, *args, **kwargs) -> str:
    """Call func and return the InputError message it raises."""
    try:
        func(*args, **kwargs)
    except InputError as e:
        return str(e)
    assert False, f"{func.__name__} should have raised InputError"


def test_load_default_input_file():
    """The bundled input.txt carries its own dimension header."""
    snapshot = load_input(str(project_root / "input.txt"))

    assert snapshot.num_processes == 5
    assert snapshot.num_resources == 3
    assert snapshot.allocation_matrix[2].tolist() == [3, 0, 2]
    assert snapshot.max_demand_matrix[0].tolist() == [7, 5, 3]
    assert snapshot.available_vector.tolist() == [3, 3, 2]
    assert snapshot.resource_names == ["A", "B", "C"]


def test_load_fixed_form_with_configured_dimensions():
    """Headerless text needs P and R from configuration."""
    snapshot = load_input(str(SCENARIOS_DIR / "textbook_fixed.txt"), 5, 3)

    assert snapshot.allocation_matrix.shape == (5, 3)
    assert snapshot.available_vector.tolist() == [3, 3, 2]


def test_parse_text_header_and_comments():
    text = "# two processes, two resources\n2 2\n1 0  # P0\n0 1\n2 1\n1 2\n1 1\n"
    snapshot = parse_text(text, resource_names=["CPU", "DISK"])

    assert snapshot.allocation_matrix.tolist() == [[1, 0], [0, 1]]
    assert snapshot.max_demand_matrix.tolist() == [[2, 1], [1, 2]]
    assert snapshot.available_vector.tolist() == [1, 1]
    assert snapshot.resource_names == ["CPU", "DISK"]


def test_load_json_input():
    snapshot = load_input(str(SCENARIOS_DIR / "textbook_unsafe.json"))

    assert snapshot.num_processes == 5
    assert snapshot.available_vector.tolist() == [0, 0, 0]
    assert get_input_description(str(SCENARIOS_DIR / "textbook_unsafe.json")).startswith("Textbook")


def test_parse_json_accepts_max_alias():
    data = {"allocation": [[0, 1]], "max": [[1, 1]], "available": [1, 0]}
    snapshot = parse_json(data)
    assert snapshot.need_matrix.tolist() == [[1, 0]]


def test_missing_file():
    message = expect_input_error(load_input, str(project_root / "does_not_exist.txt"))
    assert "not found" in message


def test_truncated_input():
    body = " ".join(TEXTBOOK_BODY.split()[:-1])
    message = expect_input_error(parse_text, body, 5, 3)
    assert "truncated" in message and "available vector" in message


def test_truncated_header():
    message = expect_input_error(parse_text, "5")
    assert "dimension header" in message


def test_non_numeric_token():
    message = expect_input_error(parse_text, TEXTBOOK_BODY.replace("9 0 2", "9 x 2"), 5, 3)
    assert "'x'" in message


def test_trailing_data():
    message = expect_input_error(parse_text, TEXTBOOK_BODY + "\n4\n", 5, 3)
    assert "trailing" in message


def test_allocation_exceeding_max():
    text = "1 2\n3 1\n2 1\n0 0\n"
    message = expect_input_error(parse_text, text)
    assert "exceeds max demand" in message


def test_negative_values():
    expect_input_error(parse_text, "1 1\n0\n1\n-1\n")


def test_value_out_of_range():
    """An integer wider than 64 bits is reported as out of range, not non-integer."""
    message = expect_input_error(parse_text, f"1 1\n0\n{2**70}\n0\n")
    assert "Max matrix" in message and "out of range" in message
    assert "integers only" not in message


def test_invalid_dimensions():
    expect_input_error(parse_text, "0 3\n")
    expect_input_error(parse_text, TEXTBOOK_BODY, 5, None)
    expect_input_error(parse_text, TEXTBOOK_BODY, 0, 3)


def test_json_errors(tmp_path):
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{not json", encoding="utf-8")
    assert "Invalid JSON" in expect_input_error(load_input, str(bad_json))

    missing = {"allocation": [[0]], "available": [1]}
    assert "max_need" in expect_input_error(parse_json, missing)

    expect_input_error(parse_json, [1, 2, 3])

    data = {"allocation": [[0]], "max_need": [[1]], "available": [1]}
    assert "configured for 2" in expect_input_error(parse_json, data, 2, 1)

    strings = {"allocation": [["a"]], "max_need": [[1]], "available": [1]}
    expect_input_error(parse_json, strings)

    booleans = {"allocation": [[True, 0]], "max_need": [[1, 1]], "available": [0, 0]}
    assert "boolean" in expect_input_error(parse_json, booleans)

    bool_available = {"allocation": [[0, 0]], "max_need": [[1, 1]], "available": [False, 1]}
    assert "boolean" in expect_input_error(parse_json, bool_available)

    name_string = {"allocation": [[0, 0, 0]], "max_need": [[1, 1, 1]], "available": [0, 0, 0],
                   "resource_names": "XYZ"}
    assert "list of strings" in expect_input_error(parse_json, name_string)

    name_numbers = dict(name_string, resource_names=[1, 2, 3])
    assert "list of strings" in expect_input_error(parse_json, name_numbers)


def test_json_roundtrip_through_file(tmp_path):
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps({
        "allocation": [[0, 0], [1, 0]],
        "max_need": [[1, 1], [1, 1]],
        "available": [0, 1],
        "resource_names": ["X", "Y"],
    }), encoding="utf-8")

    snapshot = load_input(str(path))
    assert snapshot.resource_names == ["X", "Y"]
    assert get_input_description(str(path)) == ""


def test_description_of_text_file_is_empty():
    assert get_input_description(str(project_root / "input.txt")) == ""


def main():
    """Run this module's tests (several need pytest's tmp_path/capsys fixtures)."""
    import pytest
    return pytest.main([__file__, "-v"])


if __name__ == '__main__':
    sys.exit(main())
