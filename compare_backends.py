#!/usr/bin/env python3
"""
Compare integer backends and BSGS variants across test cases.

1. mulmod micro-benchmark: time (g * h) mod p on every backend with the
   512-bit challenge values from input/testcase_1.txt.
2. Run every practical solver variant on each case file and report
   which one is fastest.

Usage:
    python3 compare_backends.py [--cases DIR] [--iterations N]
"""

import argparse
import re
import sys
import time
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple

sys.path.insert(0, str(Path(__file__).parent))

from algorithm_limits import is_practical
from BabyStep.main import discrete_log, discrete_log_naive
from dlp_utils import BACKENDS, DLPError, answer_path_for, get_backend, load_answer, load_input

# name -> (solver function, backend name)
SOLVERS: Dict[str, Tuple[Callable, str]] = {
    'bigint': (discrete_log, 'bigint'),
    'mpz': (discrete_log, 'mpz'),
    'naive-bigint': (discrete_log_naive, 'bigint'),
    'naive-mpz': (discrete_log_naive, 'mpz'),
}

CHALLENGE = Path(__file__).parent / 'input' / 'testcase_1.txt'


def discover_case_files(cases_dir: Path) -> List[Path]:
    """Return sorted case files in cases_dir or its XXbit/ subdirectories."""
    cases_dir = Path(cases_dir)
    if not cases_dir.exists():
        return []

    def case_key(p: Path):
        m = re.search(r'case_(\d+)\.txt$', p.name)
        return (str(p.parent), int(m.group(1)) if m else 0)

    files = (list(cases_dir.glob('testcase_*.txt')) + list(cases_dir.glob('case_*.txt'))
             + list(cases_dir.glob('*bit/case_*.txt')))
    return sorted(files, key=case_key)


def mulmod_benchmark(backend_name: str, case_path: Path = CHALLENGE, iterations: int = 100_000) -> float:
    """Average seconds per (g * h) mod p on one backend."""
    backend = get_backend(backend_name)
    p, g, h, _ = load_input(case_path, backend)

    start = time.perf_counter()
    for _ in range(iterations):
        backend.mulmod(g, h, p)
    return (time.perf_counter() - start) / iterations


def time_solver(solver_name: str, case_path: Path) -> Tuple[float, int]:
    """
    Run one solver variant on a case file.

    Returns:
        (elapsed seconds, x)

    Raises:
        DLPError: if the solver fails
    """
    solve, backend_name = SOLVERS[solver_name]
    backend = get_backend(backend_name)
    p, g, h, x_max_exp = load_input(case_path, backend)

    start = time.perf_counter()
    x = solve(g, h, p, x_max_exp, backend=backend)
    elapsed = time.perf_counter() - start

    if backend.powm(g, backend.convert(x), p) != h % p:
        raise DLPError(f"{solver_name} returned x = {x}, which does not verify")
    return elapsed, x


def case_bound(case_path: Path) -> int:
    return load_input(case_path)[3]


def main():
    parser = argparse.ArgumentParser(description="Compare BSGS backends")
    parser.add_argument("--cases", default=str(Path(__file__).parent / 'test_cases'),
                        help="Directory with test cases (falls back to input/)")
    parser.add_argument("--iterations", type=int, default=100_000, help="mulmod iterations per backend")
    args = parser.parse_args()

    print("=" * 80)
    print("MULMOD MICRO-BENCHMARK ((g * h) mod p, 512-bit p)")
    print("=" * 80)
    for name, backend in BACKENDS.items():
        per_op = mulmod_benchmark(name, iterations=args.iterations)
        print(f"{name:<10} {per_op * 1e9:10.1f} ns/iter   ({backend.description})")

    test_files = discover_case_files(Path(args.cases))
    if not test_files:
        test_files = discover_case_files(Path(__file__).parent / 'input')
    if not test_files:
        print("Error: No test cases found", file=sys.stderr)
        sys.exit(1)

    print(f"\n{'=' * 80}")
    print("BSGS SOLVER COMPARISON")
    print("=" * 80)
    print(f"Testing {len(test_files)} test cases\n")

    results = {name: {'times': [], 'wins': 0} for name in SOLVERS}

    for test_file in test_files:
        try:
            bits = case_bound(test_file)
        except ValueError as e:
            print(f"Error loading {test_file}: {e}\n")
            continue

        print(f"\n{test_file}  (x < 2^{bits})")
        expected: Optional[int] = None
        answer_path = answer_path_for(test_file)
        if answer_path:
            expected = load_answer(answer_path)

        times = {}
        found = []
        for name in SOLVERS:
            if not is_practical(name, bits):
                print(f"  {name:<16}-  skipped (beyond practical limit)")
                continue
            print(f"  {name:<16}", end="", flush=True)
            try:
                elapsed, x = time_solver(name, test_file)
            except DLPError as e:
                print(f"✗  Error: {e}")
                continue
            times[name] = elapsed
            results[name]['times'].append(elapsed)
            found.append(x)
            print(f"✓  {elapsed:8.4f}s  (x = {x})")

        if expected is not None and found:
            if all(x == expected for x in found):
                print("  ✓ All solvers found the expected answer")
            else:
                print(f"  ⚠ Warning: results differ from answer file (x = {expected})")

        if times:
            winner = min(times, key=times.get)
            results[winner]['wins'] += 1
            print(f"  → Fastest: {winner} ({times[winner]:.4f}s)")

    print(f"\n\n{'=' * 80}")
    print("SUMMARY")
    print(f"{'=' * 80}\n")
    print(f"{'Solver':<16} {'Avg Time':<12} {'Wins':<8} {'Solved'}")
    print("-" * 80)
    for name, data in results.items():
        if data['times']:
            avg_time = sum(data['times']) / len(data['times'])
            print(f"{name:<16} {avg_time:8.4f}s    {data['wins']:<8} {len(data['times'])}/{len(test_files)}")
        else:
            print(f"{name:<16} {'N/A':<12} {data['wins']:<8} 0/{len(test_files)}")
    print("=" * 80)


if __name__ == "__main__":
    main()
