#!/usr/bin/env python3
"""
Discrete Log Test Case Generator

Usage:
    - Single bound:
            python3 generate_test_cases.py <k>
                where k = x_max_exp (2-48)
                generates 5 cases in test_cases/<k>bit/

    - Range with optional cases per bound:
            python3 generate_test_cases.py <start> <end> [--cases <n>] [--prime-bits <b>]
"""

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

from dlp_utils.generator import generate_test_suite


def main():
    parser = argparse.ArgumentParser(description="Generate discrete log test cases")
    parser.add_argument("start", type=int, help="First x_max_exp")
    parser.add_argument("end", type=int, nargs="?", help="Last x_max_exp (defaults to start)")
    parser.add_argument("--cases", type=int, default=5, help="Cases per bound")
    parser.add_argument("--prime-bits", type=int, default=None, help="Bit length of p")
    parser.add_argument("--output", default=str(Path(__file__).parent / 'test_cases'),
                        help="Root directory for XXbit/ folders")
    args = parser.parse_args()

    end = args.end if args.end is not None else args.start
    if args.start < 0 or end < args.start:
        print(f"Error: invalid range {args.start}-{end}", file=sys.stderr)
        sys.exit(1)

    output_root = Path(args.output)
    for bits in range(args.start, end + 1):
        print(f"\n{bits}-bit bound:")
        try:
            generate_test_suite(output_root / f'{bits:02d}bit', x_max_exp=bits, num_cases=args.cases,
                                prime_bits=args.prime_bits, seed=bits * 1000)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
