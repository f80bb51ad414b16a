"""
Modular arithmetic over any arbitrary-precision integer backend.

Every function here is written once against the BigInteger capability
(see bigint.py): it only uses +, -, *, //, %, unary -, >>, comparisons
and construction from a small integer through the operand's own type.
"""

from typing import NamedTuple, Optional

from .errors import InvalidModulusError, NotInvertibleError


class GcdResult(NamedTuple):
    """Greatest common divisor with coefficients such that gcd = c1*a + c2*b."""
    gcd: object
    c1: object
    c2: object


def _const(like, value: int):
    """Build a small constant of the same integer type as `like`."""
    return type(like)(value)


def _check_modulus(n) -> None:
    if n <= 0:
        raise InvalidModulusError(n)


def normalize(a, n):
    """
    Find the standard representation of a (mod n).

    Args:
        a: Any integer
        n: Positive modulus

    Returns:
        r with 0 <= r < n and r = a (mod n)

    Raises:
        InvalidModulusError: if n <= 0
    """
    _check_modulus(n)
    r = a % n
    # Truncating-remainder backends leave the sign of a
    if r < 0:
        r = r + n
    return r


def extended_gcd(a, b) -> GcdResult:
    """
    Calculate greatest common divisor and the corresponding coefficients.

    Iterative extended Euclid. Never fails; gcd(0, 0) = 0.

    Args:
        a: First integer
        b: Second integer

    Returns:
        GcdResult(gcd, c1, c2) with gcd = c1*a + c2*b and gcd >= 0
    """
    zero, one = _const(a, 0), _const(a, 1)
    s, old_s = zero, one
    t, old_t = one, zero
    r, old_r = b, a

    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_s, s = s, old_s - quotient * s
        old_t, t = t, old_t - quotient * t

    if old_r < 0:
        old_r, old_s, old_t = -old_r, -old_s, -old_t

    return GcdResult(old_r, old_s, old_t)


def inverse(a, n) -> Optional[object]:
    """
    Calculate the inverse of a (mod n).

    Args:
        a: Value to invert
        n: Positive modulus

    Returns:
        c in [0, n) with (a * c) mod n = 1, or None if gcd(a, n) != 1

    Raises:
        InvalidModulusError: if n <= 0
    """
    _check_modulus(n)
    gcd, c1, _ = extended_gcd(a, n)
    if gcd == 1:
        return normalize(c1, n)
    return None


mod_inv = inverse


def powm(base, exp, modulus):
    """
    Calculate base^exp (mod modulus) by square-and-multiply.

    A negative exponent inverts the base first.

    Args:
        base: Base
        exp: Exponent, may be negative
        modulus: Positive modulus

    Returns:
        base^exp reduced into [0, modulus)

    Raises:
        InvalidModulusError: if modulus <= 0
        NotInvertibleError: if exp < 0 and base has no inverse mod modulus
    """
    _check_modulus(modulus)
    one = _const(modulus, 1)
    two = _const(modulus, 2)
    # 1 mod 1 is 0
    result = one % modulus
    base = normalize(base, modulus)

    if exp < 0:
        exp = -exp
        inv = inverse(base, modulus)
        if inv is None:
            raise NotInvertibleError(base, modulus)
        base = inv

    while exp > 0:
        if exp % two == one:
            result = (result * base) % modulus
        exp = exp >> 1
        base = (base * base) % modulus

    return result
