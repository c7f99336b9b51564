"""Precomputed tables for the Ziggurat samplers and the linear-normal mappers.

All tables are built once, when this module is first imported, validated, and
exposed as read-only NumPy arrays. Module import runs under the interpreter's
import lock, so every table is complete before any transform can read it.
"""

import logging
import math

import numpy as np

from .config import get_linear_config, get_ziggurat_config
from .exceptions import TableIntegrityError
from .probit import probit_high_precision

logger = logging.getLogger(__name__)


def build_ziggurat_table(
    n_boxes: int, r: float, area: float, dtype: str | np.dtype = "float64"
) -> np.ndarray:
    """Build the right x-edges of the Ziggurat boxes covering exp(-x**2 / 2).

    Arguments
    ---------
        n_boxes (int): Number of boxes, including the bottom box holding the tail.
        r (float): x-coordinate of the bottom box's right edge.
        area (float): Common area of every box.
        dtype (str or np.dtype): Element type of the returned table.

    Returns
    -------
        np.ndarray: Length ``n_boxes + 1``. Entry 0 is ``area / f(r)``, the
        width of a rectangle with the bottom box's area; entry 1 is ``r``;
        entries decrease to the last, which is 0.

    Raises
    ------
        TableIntegrityError: If the recurrence leaves the density's range for
        the given ``r`` and ``area``, or the result fails validation.
    """
    edges = [0.0] * (n_boxes + 1)
    f = math.exp(-0.5 * r * r)
    edges[0] = area / f
    edges[1] = r
    for i in range(2, n_boxes):
        term = area / edges[i - 1] + f
        if not 0.0 < term < 1.0:
            raise TableIntegrityError(
                f"Ziggurat recurrence left (0, 1) at box {i} "
                f"(r={r}, area={area}, n_boxes={n_boxes})"
            )
        xx = math.log(term)
        edges[i] = math.sqrt(-2.0 * xx)
        f = math.exp(xx)
    edges[n_boxes] = 0.0

    table = np.asarray(edges, dtype=np.float64).astype(dtype)
    validate_ziggurat_table(table)
    return table


def validate_ziggurat_table(table: np.ndarray) -> None:
    """Check that Ziggurat x-edges strictly decrease from index 1 to a final 0.

    Raises
    ------
        TableIntegrityError: If any invariant is violated.
    """
    if table.ndim != 1 or table.shape[0] < 3:
        raise TableIntegrityError(
            f"Ziggurat table must be 1-D with at least 3 entries, got shape {table.shape}"
        )
    if not np.all(np.isfinite(table)):
        raise TableIntegrityError("Ziggurat table contains non-finite entries")
    if table[-1] != 0.0:
        raise TableIntegrityError(
            f"Ziggurat table must end in 0.0, ends in {table[-1]!r}"
        )
    steps = np.diff(table[1:])
    if not np.all(steps < 0):
        bad = int(np.argmax(steps >= 0)) + 1
        raise TableIntegrityError(
            f"Ziggurat x-edges must strictly decrease; entry {bad + 1} "
            f"({table[bad + 1]!r}) does not fall below entry {bad} ({table[bad]!r})"
        )


def build_linear_table(
    size: int, step: float, dtype: str | np.dtype = "float64"
) -> np.ndarray:
    """Build the high-precision probit values at ``0.5 + i * step``.

    Raises
    ------
        TableIntegrityError: If the result fails validation.
    """
    values = [probit_high_precision(0.5 + i * step) for i in range(size)]
    table = np.asarray(values, dtype=np.float64).astype(dtype)
    validate_linear_table(table)
    return table


def validate_linear_table(table: np.ndarray) -> None:
    """Check that the interpolation table starts at 0.0 and strictly increases.

    Raises
    ------
        TableIntegrityError: If any invariant is violated.
    """
    if table.ndim != 1 or table.shape[0] < 2:
        raise TableIntegrityError(
            f"Interpolation table must be 1-D with at least 2 entries, got shape {table.shape}"
        )
    if table[0] != 0.0:
        raise TableIntegrityError(
            f"Interpolation table must start at 0.0, starts at {table[0]!r}"
        )
    steps = np.diff(table)
    if not np.all(steps > 0):
        bad = int(np.argmax(~(steps > 0)))
        raise TableIntegrityError(
            f"Interpolation table must strictly increase; entry {bad + 1} "
            f"({table[bad + 1]!r}) does not exceed entry {bad} ({table[bad]!r})"
        )


def ziggurat_table_from_config(config: dict) -> np.ndarray:
    """Build the table described by a Ziggurat configuration dictionary."""
    return build_ziggurat_table(
        config["n_boxes"], config["r"], config["area"], config["dtype"]
    )


def _freeze(table: np.ndarray, name: str) -> np.ndarray:
    table.flags.writeable = False
    logger.debug(
        "Built %s: %d x %s, first=%r last=%r",
        name,
        table.shape[0],
        table.dtype,
        table[0],
        table[-1],
    )
    return table


ZIGGURAT_TABLE = _freeze(
    ziggurat_table_from_config(get_ziggurat_config("double")), "ZIGGURAT_TABLE"
)
ZIGGURAT_TABLE_F = _freeze(
    ziggurat_table_from_config(get_ziggurat_config("float")), "ZIGGURAT_TABLE_F"
)

_linear_config = get_linear_config()
LINEAR_TABLE = _freeze(
    build_linear_table(_linear_config["size"], _linear_config["step"]), "LINEAR_TABLE"
)
LINEAR_TABLE_F = LINEAR_TABLE.astype(np.float32)
validate_linear_table(LINEAR_TABLE_F)
LINEAR_TABLE_F = _freeze(LINEAR_TABLE_F, "LINEAR_TABLE_F")
