"""
Test case generator for discrete log problems.

Each case is a safe prime p = 2q + 1, a generator g of the order-q
subgroup of squares, and h = g^x mod p for a secret x below the
BSGS search bound. q is kept larger than 2^x_max_exp so x is the
unique answer in range.
"""

import random
from pathlib import Path
from typing import Optional, Tuple

from .io_utils import write_case
from .mod_utils import powm


def is_prime_miller_rabin(n: int, k: int = 12, rng: Optional[random.Random] = None) -> bool:
    """
    Miller-Rabin primality test.

    Args:
        n: Number to test for primality
        k: Number of rounds (higher = more accurate)
        rng: Random source for the witnesses

    Returns:
        True if n is probably prime, False if composite
    """
    rng = rng or random
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False

    # Write n-1 as 2^r * d
    d = n - 1
    r = 0
    while d % 2 == 0:
        d >>= 1
        r += 1

    for _ in range(k):
        a = rng.randrange(2, n - 1)
        x = powm(a, d, n)

        if x == 1 or x == n - 1:
            continue

        for _ in range(r - 1):
            x = powm(x, 2, n)
            if x == n - 1:
                break
        else:
            return False

    return True


def generate_safe_prime(bits: int, rng: Optional[random.Random] = None) -> Tuple[int, int]:
    """
    Generate a safe prime p = 2q + 1 with q prime.

    Args:
        bits: Bit length of p (at least 3)
        rng: Random source

    Returns:
        (p, q)
    """
    if bits < 3:
        raise ValueError(f"safe primes need at least 3 bits, got {bits}")
    rng = rng or random
    while True:
        # Top bit set so p has exactly `bits` bits
        q = rng.getrandbits(bits - 1) | (1 << (bits - 2)) | 1
        if not is_prime_miller_rabin(q, rng=rng):
            continue
        p = 2 * q + 1
        if p.bit_length() == bits and is_prime_miller_rabin(p, rng=rng):
            return p, q


def find_subgroup_generator(p: int, rng: Optional[random.Random] = None) -> int:
    """Return a generator of the order-(p-1)/2 subgroup of squares mod a safe prime p."""
    rng = rng or random
    while True:
        r = rng.randrange(2, p - 1)
        g = powm(r, 2, p)
        if g != 1:
            return g


def search_bound(x_max_exp: int) -> int:
    """Largest exclusive exponent BSGS covers for this bound: (2^floor(k/2))^2."""
    return 1 << (2 * (x_max_exp // 2))


def choose_secret(case_num: int, x_max_exp: int, rng: Optional[random.Random] = None) -> int:
    """
    Choose a secret exponent with a position that depends on the case number.

    1: x < B, found on the first giant step
    2: x just above B
    3: x in the middle of the range
    4: x near the top of the range
    5+: uniform
    """
    rng = rng or random
    B = 1 << (x_max_exp // 2)
    bound = search_bound(x_max_exp)

    if case_num == 1:
        return rng.randrange(0, B)
    elif case_num == 2:
        return rng.randrange(B, min(2 * B, bound)) if bound > B else rng.randrange(0, bound)
    elif case_num == 3:
        return rng.randrange(bound // 4, max(bound // 4 + 1, 3 * bound // 4))
    elif case_num == 4:
        return rng.randrange(max(0, bound - B), bound)
    return rng.randrange(0, bound)


def generate_test_case(output_dir: Path, case_num: int, x_max_exp: int,
                       prime_bits: Optional[int] = None, secret: Optional[int] = None,
                       rng: Optional[random.Random] = None, file_prefix: str = 'case_') -> Tuple[int, int, int, int]:
    """
    Generate a single discrete log test case and write it to output_dir.

    Args:
        output_dir: Directory to save the case and answer files
        case_num: Test case number
        x_max_exp: Bound exponent written into the case
        prime_bits: Bit length of p (defaults to x_max_exp + 16, at least 24)
        secret: Secret exponent (chosen by case number if None)
        rng: Random source
        file_prefix: 'case_' for test_cases/, 'testcase_' for input/

    Returns:
        (p, g, h, x)
    """
    rng = rng or random
    if prime_bits is None:
        prime_bits = max(24, x_max_exp + 16)
    if prime_bits < x_max_exp + 2:
        raise ValueError(f"prime_bits={prime_bits} too small for x_max_exp={x_max_exp}")

    p, _ = generate_safe_prime(prime_bits, rng=rng)
    g = find_subgroup_generator(p, rng=rng)
    x = choose_secret(case_num, x_max_exp, rng=rng) if secret is None else secret
    h = powm(g, x, p)

    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    write_case(output_dir / f"{file_prefix}{case_num}.txt", p, g, h, x_max_exp)
    with (output_dir / f"answer_{case_num}.txt").open('w') as f:
        f.write(f"{x}\n")

    print(f"Generated test case {case_num}: p={p} ({prime_bits} bits), g={g}, x={x}")
    return p, g, h, x


def generate_test_suite(output_dir: Path, x_max_exp: int, num_cases: int = 5,
                        prime_bits: Optional[int] = None, seed: Optional[int] = None) -> None:
    """
    Generate a suite of test cases sharing one bound.

    Args:
        output_dir: Directory to save test cases
        x_max_exp: Bound exponent
        num_cases: Number of test cases to generate
        prime_bits: Bit length of the primes
        seed: Seed for reproducible suites
    """
    rng = random.Random(seed)
    output_dir = Path(output_dir)

    print(f"Generating {num_cases} test cases (x < 2^{x_max_exp})...")
    print("=" * 60)

    for i in range(1, num_cases + 1):
        generate_test_case(output_dir, i, x_max_exp, prime_bits=prime_bits, rng=rng)

    print("=" * 60)
    print(f"Test suite generated successfully in {output_dir}")
