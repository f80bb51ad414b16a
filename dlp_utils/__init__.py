"""Utility functions for discrete log algorithms."""

from .errors import DLPError, InvalidModulusError, NotInvertibleError, SearchExhaustedError
from .bigint import BigInteger, Backend, BACKENDS, DEFAULT_BACKEND, get_backend, backend_for
from .mod_utils import GcdResult, normalize, extended_gcd, inverse, mod_inv, powm
from .io_utils import load_input, load_answer, answer_path_for, write_case, format_output

__all__ = [
    'DLPError',
    'InvalidModulusError',
    'NotInvertibleError',
    'SearchExhaustedError',
    'BigInteger',
    'Backend',
    'BACKENDS',
    'DEFAULT_BACKEND',
    'get_backend',
    'backend_for',
    'GcdResult',
    'normalize',
    'extended_gcd',
    'inverse',
    'mod_inv',
    'powm',
    'load_input',
    'load_answer',
    'answer_path_for',
    'write_case',
    'format_output',
]
