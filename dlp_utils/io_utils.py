"""
Reading and writing discrete log test cases.

Case file format (one decimal value per line):
    p
    g
    h
    x_max_exp

The answer file sitting next to a case holds the exponent x.
    input/testcase_N.txt      -> input/answer_N.txt
    test_cases/XXbit/case_N.txt -> test_cases/XXbit/answer_N.txt
"""

import re
from pathlib import Path
from typing import Optional, Tuple

from .bigint import Backend, BACKENDS, DEFAULT_BACKEND

CASE_NAME = re.compile(r'^(?:test)?case_(\d+)\.txt$')


def load_input(path: Path, backend: Optional[Backend] = None) -> Tuple[object, object, object, int]:
    """
    Load a test case.

    Args:
        path: Case file
        backend: Backend used to parse p, g and h (bigint if omitted)

    Returns:
        (p, g, h, x_max_exp)

    Raises:
        ValueError: if the file is malformed
    """
    backend = backend or BACKENDS[DEFAULT_BACKEND]
    lines = [line.strip() for line in Path(path).read_text().splitlines() if line.strip()]
    if len(lines) < 4:
        raise ValueError(f"{path}: expected 4 lines (p, g, h, x_max_exp), got {len(lines)}")

    p = backend.parse(lines[0])
    g = backend.parse(lines[1])
    h = backend.parse(lines[2])
    x_max_exp = int(lines[3])
    if x_max_exp < 0:
        raise ValueError(f"{path}: x_max_exp must be non-negative, got {x_max_exp}")
    return p, g, h, x_max_exp


def write_case(path: Path, p, g, h, x_max_exp: int) -> None:
    """Write a test case in the format load_input reads."""
    path = Path(path)
    with path.open('w') as f:
        f.write(f"{p}\n")
        f.write(f"{g}\n")
        f.write(f"{h}\n")
        f.write(f"{x_max_exp}\n")


def case_number(path: Path) -> Optional[str]:
    m = CASE_NAME.match(Path(path).name)
    return m.group(1) if m else None


def answer_path_for(case_path: Path) -> Optional[Path]:
    """Path of the answer file belonging to a case file, or None for other names."""
    num = case_number(case_path)
    if num is None:
        return None
    return Path(case_path).parent / f"answer_{num}.txt"


def load_answer(path: Path) -> Optional[int]:
    """Read the expected exponent, or None if missing or empty."""
    path = Path(path)
    if not path.exists():
        return None
    content = path.read_text().strip()
    if not content:
        return None
    return int(content)


def format_output(x: int, elapsed: float, verified: bool, expected: Optional[int] = None) -> str:
    """Format a solver result block for the console."""
    lines = [
        '=' * 50,
        f"Solution: x = {x}",
    ]
    if expected is not None:
        lines.append(f"Expected: x = {expected}")
    lines.append(f"Time: {elapsed:.6f} seconds")
    lines.append(f"Verification (g^x = h mod p): {'PASSED' if verified else 'FAILED'}")
    if expected is not None:
        lines.append(f"Cross-check (vs answer file): {'PASSED' if x == expected else 'FAILED'}")
    lines.append('=' * 50)
    return '\n'.join(lines)
