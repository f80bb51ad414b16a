"""Exceptions raised by the modular arithmetic layer and the BSGS solver."""


class DLPError(Exception):
    """Base class for discrete logarithm failures."""


class InvalidModulusError(DLPError, ValueError):
    """Raised when a modulus is zero or negative."""

    def __init__(self, modulus):
        super().__init__(f"modulus must be positive, got {modulus}")
        self.modulus = modulus


class NotInvertibleError(DLPError, ValueError):
    """Raised when a value has no multiplicative inverse modulo n."""

    def __init__(self, value, modulus):
        super().__init__(f"{value} is not invertible modulo {modulus}")
        self.value = value
        self.modulus = modulus


class SearchExhaustedError(DLPError):
    """Raised when BSGS finishes both passes without a collision.

    Either `x_max_exp` was too small for the true logarithm, or no
    solution exists in range.
    """

    def __init__(self, x_max_exp: int):
        super().__init__(f"no solution below 2^{x_max_exp}: `x_max_exp` is too small")
        self.x_max_exp = x_max_exp
