#!/usr/bin/env python3
"""
Solver Feasibility Configuration

Defines which solver variants can handle which bounds x_max_exp.
The table holds 2^(x_max_exp/2) entries, so memory caps every variant;
the naive variants re-exponentiate on every step and give up much earlier.
"""

# Solver feasibility limits (x_max_exp)
SOLVER_LIMITS = {
    'bigint': {
        'practical': 40,  # ~2^20 table entries, seconds
        'maximum': 48,    # ~2^24 table entries, memory-bound
        'description': 'Incremental BSGS on Python int. Practical up to 40 bits.'
    },
    'mpz': {
        'practical': 40,
        'maximum': 48,
        'description': 'Incremental BSGS on gmpy2.mpz. Practical up to 40 bits, fastest per step.'
    },
    'naive-bigint': {
        'practical': 24,  # one pure-Python powm per step
        'maximum': 32,
        'description': 'Re-exponentiating BSGS on Python int. Practical up to 24 bits.'
    },
    'naive-mpz': {
        'practical': 32,  # one GMP powmod per step
        'maximum': 36,
        'description': 'Re-exponentiating BSGS on gmpy2.mpz. Practical up to 32 bits.'
    },
}


def is_feasible(solver, bits):
    """Check if a solver is feasible for a given bound."""
    if solver not in SOLVER_LIMITS:
        return False
    return bits <= SOLVER_LIMITS[solver]['maximum']


def is_practical(solver, bits):
    """Check if a solver is practically feasible for a given bound."""
    if solver not in SOLVER_LIMITS:
        return False
    return bits <= SOLVER_LIMITS[solver]['practical']


def get_practical_range(solver):
    """Get the practical bound range for a solver."""
    if solver not in SOLVER_LIMITS:
        return None
    return (2, SOLVER_LIMITS[solver]['practical'])


def print_solver_limits():
    """Print a summary of solver limits."""
    print("=" * 80)
    print("BSGS Solver Feasibility Limits")
    print("=" * 80)

    for solver, limits in SOLVER_LIMITS.items():
        print(f"\n{solver}:")
        print(f"  Practical: Up to x_max_exp = {limits['practical']}")
        print(f"  Maximum:   Up to x_max_exp = {limits['maximum']}")
        print(f"  {limits['description']}")

    print("\n" + "=" * 80)


if __name__ == "__main__":
    print_solver_limits()
