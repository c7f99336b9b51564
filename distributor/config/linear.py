"""Configuration of the linear-interpolation ("linear normal") tables."""

TRAIL_END = 8.375


def get_linear_config():
    """Get the configuration of the linear-interpolation table.

    ``size`` entries hold high-precision probit values at quantiles
    ``0.5 + i * step``; the last entry starts the trail, which is blended
    towards ``trail_end``.
    """
    return {
        "size": 1024,
        "index_bits": 10,
        "step": 2.0**-11,
        "trail_end": TRAIL_END,
    }
