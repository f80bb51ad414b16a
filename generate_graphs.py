#!/usr/bin/env python3
"""
Graph generator - times every BSGS solver variant per bound and plots the results.
Missing test cases are generated first (test_cases/XXbit/).

Usage:
    python3 generate_graphs.py <bit_start> [bit_end]
"""

import sys
from pathlib import Path

try:
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
except ImportError:
    print("Error: matplotlib not installed. Run: pip3 install matplotlib")
    sys.exit(1)

sys.path.insert(0, str(Path(__file__).parent))

from algorithm_limits import is_practical
from compare_backends import SOLVERS, discover_case_files, time_solver
from dlp_utils import DLPError
from dlp_utils.generator import generate_test_suite

COLORS = {
    'bigint': '#3498db',
    'mpz': '#2ecc71',
    'naive-bigint': '#e74c3c',
    'naive-mpz': '#f39c12',
}


def ensure_cases(bits: int, cases_root: Path) -> Path:
    """Return the first case file for a bound, generating a suite if none exist."""
    cases_dir = cases_root / f'{bits:02d}bit'
    case_files = discover_case_files(cases_dir)
    if not case_files:
        generate_test_suite(cases_dir, x_max_exp=bits, num_cases=5, seed=bits)
        case_files = discover_case_files(cases_dir)
    return case_files[0]


def collect_timings(bit_start: int, bit_end: int, cases_root: Path):
    plot_data = {name: {'bits': [], 'times': []} for name in SOLVERS}

    print(f"Collecting performance data for {bit_start}-{bit_end} bits...")
    for bits in range(bit_start, bit_end + 1):
        print(f"  Testing {bits}-bit...", end='', flush=True)
        test_file = ensure_cases(bits, cases_root)
        for name in SOLVERS:
            if not is_practical(name, bits):
                continue
            try:
                elapsed, _ = time_solver(name, test_file)
            except DLPError as e:
                print(f" ✗ {name}: {e}", end='')
                continue
            plot_data[name]['bits'].append(bits)
            plot_data[name]['times'].append(elapsed)
        print(" ✓")
    return plot_data


def generate_comparison_graphs(bit_start: int, bit_end: int, cases_root: Path = Path('test_cases'),
                               output_dir: Path = Path('graphs')) -> Path:
    """Generate performance graphs for all solver variants, return the combined plot path."""
    plot_data = collect_timings(bit_start, bit_end, cases_root)

    output_dir.mkdir(exist_ok=True)
    print("\nGenerating graphs...")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(16, 6))

    for name, data in plot_data.items():
        if data['bits']:
            ax1.plot(data['bits'], data['times'], marker='o', label=name,
                     color=COLORS[name], linewidth=2, markersize=6)
            ax2.plot(data['bits'], data['times'], marker='o', label=name,
                     color=COLORS[name], linewidth=2, markersize=6)

    ax1.set_xlabel('x_max_exp', fontsize=12)
    ax1.set_ylabel('Time (seconds)', fontsize=12)
    ax1.set_title(f'BSGS Performance ({bit_start}-{bit_end} bits)', fontsize=14, fontweight='bold')
    ax1.legend(loc='upper left', fontsize=10)
    ax1.grid(True, alpha=0.3)

    ax2.set_xlabel('x_max_exp', fontsize=12)
    ax2.set_ylabel('Time (seconds, log scale)', fontsize=12)
    ax2.set_title('BSGS Performance - Log Scale', fontsize=14, fontweight='bold')
    ax2.set_yscale('log')
    ax2.legend(loc='upper left', fontsize=10)
    ax2.grid(True, alpha=0.3, which='both')

    plt.tight_layout()
    output_file = output_dir / f'performance_{bit_start}_{bit_end}bit.png'
    plt.savefig(output_file, dpi=150, bbox_inches='tight')
    plt.close(fig)

    print(f"  ✓ Saved: {output_file}")
    return output_file


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python3 generate_graphs.py <bit_start> [bit_end]")
        print("Example: python3 generate_graphs.py 10 30")
        sys.exit(1)

    bit_start = int(sys.argv[1])
    bit_end = int(sys.argv[2]) if len(sys.argv) > 2 else bit_start

    print("=" * 70)
    print("BSGS Performance Graph Generator")
    print("=" * 70)

    generate_comparison_graphs(bit_start, bit_end)

    print("\n" + "=" * 70)
    print("✓ Graph generation complete!")
    print("=" * 70)
