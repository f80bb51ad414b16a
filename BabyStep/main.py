"""
Baby-Step Giant-Step (BSGS) Algorithm for the discrete logarithm mod p

Given g, h, p and a bound 2^x_max_exp on the answer, finds x with
g^x = h (mod p) using a meet-in-the-middle approach. With B = 2^floor(x_max_exp/2),
every x < B^2 is x0*B + x1 with 0 <= x0, x1 < B, and g^x = h becomes
h * g^(-x1) = (g^B)^x0 (mod p):
1. Baby steps: store h * g^(-x1) for x1 = 0, 1, ..., B-1
2. Giant steps: compute (g^B)^x0 for x0 = 0, 1, ..., B-1 until a match is found

Time Complexity: O(B) multiplications mod p
Space Complexity: O(B) table entries
"""

import argparse
import sys
import time
from pathlib import Path
from typing import Dict, Optional

# Add parent directory to path for dlp_utils import
sys.path.insert(0, str(Path(__file__).parent.parent))

from dlp_utils import (
    Backend, BACKENDS, DEFAULT_BACKEND, DLPError, InvalidModulusError, NotInvertibleError,
    SearchExhaustedError, answer_path_for, backend_for, format_output, get_backend, inverse,
    load_answer, load_input,
)

PROGRESS_EVERY = 1 << 16


def step_count(x_max_exp: int) -> int:
    """B = 2^floor(x_max_exp / 2), the size of each BSGS dimension."""
    return 1 << (x_max_exp // 2)


def _prepare(g, h, p, x_max_exp: int, backend: Optional[Backend]):
    """Validate inputs, convert them to the backend type and invert g."""
    backend = backend or backend_for(p)
    if not isinstance(x_max_exp, int) or x_max_exp < 0:
        raise ValueError(f"x_max_exp must be a non-negative integer, got {x_max_exp!r}")
    g, h, p = backend.convert(g), backend.convert(h), backend.convert(p)
    if p <= 0:
        raise InvalidModulusError(p)

    g_inv = inverse(g, p)
    if g_inv is None:
        raise NotInvertibleError(g, p)
    return backend, g, h, p, g_inv


def discrete_log(g, h, p, x_max_exp: int, backend: Optional[Backend] = None,
                 verbose: bool = False) -> int:
    """
    Calculate x where g^x = h (mod p) using Baby-Step Giant-Step.

    Baby and giant steps advance by one multiplication mod p each, so
    powm is only called once, for g^B.

    Args:
        g: Base, must be invertible mod p
        h: Target
        p: Modulus
        x_max_exp: x has to be smaller than 2^x_max_exp
        backend: Integer backend (picked from the type of p if omitted)
        verbose: Print step progress

    Returns:
        The smallest x < B^2 with g^x = h (mod p)

    Raises:
        InvalidModulusError: if p <= 0
        NotInvertibleError: if g has no inverse mod p
        SearchExhaustedError: if no x < B^2 matches
    """
    backend, g, h, p, g_inv = _prepare(g, h, p, x_max_exp, backend)
    B = step_count(x_max_exp)

    # Baby steps: h * g^(-x1) mod p
    table: Dict[object, int] = {}
    lhs = h % p
    for x1 in range(B):
        if verbose and x1 % PROGRESS_EVERY == 0:
            print(f"  Baby step {x1}/{B}...", end='\r', flush=True)
        # First writer wins, so the smallest x1 is kept for a residue
        if lhs not in table:
            table[lhs] = x1
        lhs = (lhs * g_inv) % p

    if verbose:
        print(f"\n  Table built: {len(table)} entries")

    g_B = backend.powm(g, backend.from_u64(B), p)

    # Giant steps: (g^B)^x0 mod p
    rhs = backend.one % p
    for x0 in range(B):
        if verbose and x0 % PROGRESS_EVERY == 0:
            print(f"  Giant step {x0}/{B}...", end='\r', flush=True)
        x1 = table.get(rhs)
        if x1 is not None:
            if verbose:
                print()
            return x0 * B + x1
        rhs = (rhs * g_B) % p

    if verbose:
        print()
    raise SearchExhaustedError(x_max_exp)


def discrete_log_naive(g, h, p, x_max_exp: int, backend: Optional[Backend] = None) -> int:
    """
    Same search as discrete_log, exponentiating from scratch on every step.

    Much slower; kept to cross-check the incremental version.
    """
    backend, g, h, p, _ = _prepare(g, h, p, x_max_exp, backend)
    B = step_count(x_max_exp)
    b = backend.from_u64(B)

    table: Dict[object, int] = {}
    for x1 in range(B):
        lhs = (h * backend.powm(g, -backend.from_u64(x1), p)) % p
        if lhs not in table:
            table[lhs] = x1

    for x0 in range(B):
        rhs = backend.powm(backend.powm(g, b, p), backend.from_u64(x0), p)
        x1 = table.get(rhs)
        if x1 is not None:
            return x0 * B + x1

    raise SearchExhaustedError(x_max_exp)


def main():
    """Main entry point for the BSGS discrete log solver."""
    script_dir = Path(__file__).parent

    parser = argparse.ArgumentParser(description="Solve g^x = h (mod p) with Baby-Step Giant-Step")
    parser.add_argument("file", nargs="?", default=str(script_dir.parent / 'input' / 'testcase_1.txt'),
                        help="Path to test case file")
    parser.add_argument("--backend", choices=list(BACKENDS), default=DEFAULT_BACKEND,
                        help="Arbitrary-precision integer backend")
    parser.add_argument("--naive", action="store_true", help="Re-exponentiate on every step")
    parser.add_argument("--verbose", action="store_true", help="Show step progress")
    args = parser.parse_args()

    input_path = Path(args.file)
    if not input_path.exists():
        print(f"Error: Input file not found: {input_path}", file=sys.stderr)
        sys.exit(1)

    backend = get_backend(args.backend)
    try:
        p, g, h, x_max_exp = load_input(input_path, backend)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    B = step_count(x_max_exp)
    print(f"Solving discrete log using Baby-Step Giant-Step ({'naive' if args.naive else 'incremental'})...")
    print(f"Backend: {backend.name} ({backend.description})")
    print(f"p = {p}")
    print(f"g = {g}, h = {h}")
    print(f"x < 2^{x_max_exp}, B = 2^{x_max_exp // 2} = {B}")

    start_time = time.perf_counter()
    try:
        if args.naive:
            x = discrete_log_naive(g, h, p, x_max_exp, backend=backend)
        else:
            x = discrete_log(g, h, p, x_max_exp, backend=backend, verbose=args.verbose)
    except DLPError as e:
        elapsed = time.perf_counter() - start_time
        print(f"\nNo solution found: {e}")
        print(f"Time: {elapsed:.6f} seconds")
        sys.exit(1)
    elapsed = time.perf_counter() - start_time

    verified = backend.powm(g, backend.convert(x), p) == h % p

    answer_path = answer_path_for(input_path)
    expected = load_answer(answer_path) if answer_path else None

    print()
    print(format_output(x, elapsed, verified, expected))

    if not verified:
        sys.exit(1)


if __name__ == "__main__":
    main()
