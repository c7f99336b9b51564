"""Apply the scalar transforms across NumPy arrays."""

from collections.abc import Callable

import numpy as np

from .mappers import linear_normal_f, probit_i
from .rational import probit_f
from .ziggurat import normal_f, normal_f_long

FLOAT32_TRANSFORMS = frozenset(
    {probit_f, probit_i, linear_normal_f, normal_f, normal_f_long}
)


def apply_transform(
    func: Callable, values, dtype: str | np.dtype | None = None
) -> np.ndarray:
    """Map a scalar transform over every element of ``values``.

    Arguments
    ---------
        func (Callable): Any of the scalar transforms in this package, or a
            function with the same one-argument shape.
        values (array-like): Inputs; integer arrays for the state and mapper
            transforms, floating arrays for the probit functions.
        dtype (str or np.dtype, optional): Output dtype. Defaults to float32
            for the float32 transforms and float64 otherwise.

    Returns
    -------
        np.ndarray: Same shape as ``values``.

    Examples
    --------
    >>> from distributor.rational import probit_d
    >>> apply_transform(probit_d, [0.25, 0.5, 0.75])
    array([-0.67448..., 0.        , 0.67448...])
    """
    values = np.asarray(values)
    if dtype is None:
        dtype = np.float32 if func in FLOAT32_TRANSFORMS else np.float64
    # tolist() yields Python ints and floats, so uint64 states keep all bits
    flat = values.ravel().tolist()
    out = np.fromiter((func(v) for v in flat), dtype=dtype, count=len(flat))
    return out.reshape(values.shape)
