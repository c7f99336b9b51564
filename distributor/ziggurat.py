"""Ziggurat normal variates from a single word of assumed-uniform state.

Each call consumes one integer and returns one N(0, 1) variate. The bits of the
state are shared out as follows:

- the lowest ``index_bits`` select a box,
- the bit at ``sign_mask`` (just above the index) gives the sign,
- the highest ``uniform_bits`` form a uniform fraction of the box's width.

More than 98% of calls accept on the first comparison. The rest (the wedge
next to the curve and the unbounded tail below the bottom box) draw further
uniforms by repeatedly passing the state through a private invertible mixing
step, ``(state ^ xor) * mult``, so no outside random source is needed. The
rejection loop has no iteration cap; well-distributed input keeps it short.

The output is not pattern preserving: nearby states can map far apart. Use
:mod:`distributor.mappers` when input order must carry over.

References
----------
Marsaglia & Tsang, "The Ziggurat Method for Generating Random Variables" (2000).
"""

import math
from collections.abc import Callable

import numpy as np

from .config import get_ziggurat_config
from .tables import ZIGGURAT_TABLE, ZIGGURAT_TABLE_F, ziggurat_table_from_config


def make_ziggurat_sampler(
    config: dict, table: np.ndarray | None = None
) -> Callable[[int], float]:
    """Return a function mapping one state word to one normal variate.

    Arguments
    ---------
        config (dict): A Ziggurat configuration, see
            :func:`distributor.config.get_ziggurat_config`.
        table (np.ndarray, optional): Box edges matching ``config``; built
            from ``config`` when omitted.

    Returns
    -------
        Callable[[int], float]: Pure function of its integer argument.
        Returns Python floats for float64 configs and ``np.float32`` for
        float32 configs.
    """
    if table is None:
        table = ziggurat_table_from_config(config)

    state_bits = config["state_bits"]
    uniform_bits = config["uniform_bits"]
    state_mask = (1 << state_bits) - 1
    index_mask = (1 << config["index_bits"]) - 1
    sign_mask = config["sign_mask"]
    shift = state_bits - uniform_bits
    mix_xor = config["mix_xor"]
    mix_mult = config["mix_mult"]

    cast = np.float32 if np.dtype(config["dtype"]) == np.float32 else float
    edges = tuple(cast(x) for x in table)
    scale = cast(2.0**-uniform_bits)
    r = cast(config["r"])
    inv_r = cast(1.0 / config["r"])
    half = cast(0.5)
    one = cast(1.0)

    def mix(state):
        return ((state ^ mix_xor) * mix_mult) & state_mask

    def log_uniform(state):
        # log of a uniform in (0, 1], never log(0)
        return cast(math.log(((state >> shift) + 1) * 2.0**-uniform_bits))

    def sample(state):
        state = int(state) & state_mask
        while True:
            idx = state & index_mask
            u = cast(state >> shift) * scale * edges[idx]
            if u < edges[idx + 1]:
                return u if state & sign_mask else -u
            if idx == 0:
                # Marsaglia's tail method
                while True:
                    state = mix(state)
                    x = log_uniform(state) * inv_r
                    state = mix(state)
                    y = log_uniform(state)
                    if -(y + y) >= x * x:
                        break
                return x - r if state.bit_count() & 1 == 0 else r - x
            hi = edges[idx]
            lo = edges[idx + 1]
            uu = u * u
            f0 = cast(math.exp(-half * (hi * hi - uu)))
            f1 = cast(math.exp(-half * (lo * lo - uu)))
            state = mix(state)
            if f1 + cast(state >> shift) * scale * (f0 - f1) < one:
                return u if state & sign_mask else -u
            # fresh index and fraction for the next candidate
            state = mix(state)

    return sample


_normal = make_ziggurat_sampler(get_ziggurat_config("double"), ZIGGURAT_TABLE)
_normal_f = make_ziggurat_sampler(get_ziggurat_config("float"), ZIGGURAT_TABLE_F)
_normal_f_long = make_ziggurat_sampler(
    get_ziggurat_config("float_long"), ZIGGURAT_TABLE_F
)


def normal(state: int) -> float:
    """Normal variate from a 64-bit state, using 256 boxes.

    Arguments
    ---------
        state (int): Any integer, reduced modulo 2**64; should be uniformly
            distributed across calls (e.g. the output of a hash or PRNG).

    Returns
    -------
        float: A N(0, 1) variate; observed extremes are about +/-7.7.
    """
    return _normal(state)


def normal_f(state: int) -> np.float32:
    """Normal variate from a 32-bit state, using 128 boxes, in float32.

    Observed extremes are about +/-6.2.
    """
    return _normal_f(state)


def normal_f_long(state: int) -> np.float32:
    """Normal variate from a 64-bit state, using 128 boxes, in float32.

    Observed extremes are about +/-7.2.
    """
    return _normal_f_long(state)
