"""Deterministic transforms from uniform integers or fractions to N(0, 1) variates."""

__version__ = "0.1.0"

from .erfc import erfc, ndtr
from .probit import probit, probit_high_precision
from .rational import probit_d, probit_f
from .mappers import linear_normal, linear_normal_f, probit_i, probit_l
from .ziggurat import make_ziggurat_sampler, normal, normal_f, normal_f_long
from .batch import apply_transform
from .exceptions import TableIntegrityError

__all__ = [
    "erfc",
    "ndtr",
    "probit",
    "probit_high_precision",
    "probit_d",
    "probit_f",
    "probit_i",
    "probit_l",
    "linear_normal",
    "linear_normal_f",
    "make_ziggurat_sampler",
    "normal",
    "normal_f",
    "normal_f_long",
    "apply_transform",
    "TableIntegrityError",
]
