"""
Arbitrary-precision integer backends.

The solver and the modular arithmetic are written once against the
BigInteger capability below. A Backend names a concrete type that
provides it, how to build and parse values of that type, and an
optional native modular exponentiation that must agree with the
generic powm.

Registered backends:
    bigint: Python's built-in int, generic square-and-multiply powm
    mpz:    gmpy2.mpz (GMP), native gmpy2.powmod
"""

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol

import gmpy2

from . import mod_utils
from .errors import InvalidModulusError, NotInvertibleError

U64_MAX = (1 << 64) - 1


class BigInteger(Protocol):
    """Operations a concrete integer type must support.

    Values are immutable; equality and ordering are by value and the
    hash is consistent with equality, so values can key a dict.
    """

    def __add__(self, other): ...
    def __sub__(self, other): ...
    def __mul__(self, other): ...
    def __floordiv__(self, other): ...
    def __mod__(self, other): ...
    def __neg__(self): ...
    def __rshift__(self, other): ...
    def __eq__(self, other) -> bool: ...
    def __lt__(self, other) -> bool: ...
    def __le__(self, other) -> bool: ...
    def __hash__(self) -> int: ...


@dataclass(frozen=True)
class Backend:
    """A concrete BigInteger type plus how to build and exponentiate it."""
    name: str
    type: Callable
    description: str
    native_powm: Optional[Callable] = None

    def from_u64(self, value: int):
        """Construct a value from an unsigned 64-bit integer."""
        if not 0 <= value <= U64_MAX:
            raise OverflowError(f"{value} does not fit in an unsigned 64-bit integer")
        return self.type(value)

    def convert(self, value):
        """Convert any integer into this backend's type."""
        return self.type(value)

    def parse(self, text: str):
        """Parse a base-10 string."""
        return self.type(text.strip(), 10)

    @property
    def zero(self):
        return self.from_u64(0)

    @property
    def one(self):
        return self.from_u64(1)

    def powm(self, base, exp, modulus):
        """base^exp (mod modulus), native when the backend has a primitive."""
        if self.native_powm is None:
            return mod_utils.powm(base, exp, modulus)

        if modulus <= 0:
            raise InvalidModulusError(modulus)
        try:
            result = self.native_powm(base, exp, modulus)
        except (ValueError, ZeroDivisionError) as e:
            raise NotInvertibleError(base % modulus, modulus) from e
        return result % modulus

    def mulmod(self, a, b, modulus):
        """One (a * b) mod p step, the unit cost of BSGS."""
        return (a * b) % modulus


BACKENDS: Dict[str, Backend] = {
    'bigint': Backend(
        name='bigint',
        type=int,
        description='Python built-in int',
    ),
    'mpz': Backend(
        name='mpz',
        type=gmpy2.mpz,
        description='GMP integers via gmpy2',
        native_powm=gmpy2.powmod,
    ),
}

DEFAULT_BACKEND = 'bigint'


def get_backend(name: str) -> Backend:
    """Look up a backend by name."""
    try:
        return BACKENDS[name]
    except KeyError:
        raise ValueError(f"unknown backend {name!r} (choose from: {', '.join(BACKENDS)})") from None


def backend_for(value) -> Backend:
    """Return the backend whose type matches value, defaulting to bigint."""
    for backend in BACKENDS.values():
        if type(value) is backend.type:
            return backend
    return BACKENDS[DEFAULT_BACKEND]
