"""Classical probit approximation and its Newton-refined variant.

The classical approximation is Peter John Acklam's rational approximation of
the inverse standard normal CDF; see
https://web.archive.org/web/20151030215612/http://home.online.no/~pjacklam/notes/invnorm/
Its relative error is about 1.15e-9. ``probit_high_precision`` applies one
Halley-style correction step using :func:`distributor.erfc.erfc`, which brings
the error down by several orders of magnitude.

Both functions preserve ordering of their inputs, so quasi-random sequences
(van der Corput, Halton, Sobol, R2) keep their structure when mapped through
them.
"""

import math

from .erfc import erfc

# Saturated output for inputs at or beyond 0 and 1
PROBIT_LIMIT = 8.375

P_LOW = 0.02425
P_HIGH = 1.0 - P_LOW

# Central region, numerator and denominator in q**2
A = (
    -3.969683028665376e01,
    2.209460984245205e02,
    -2.759285104469687e02,
    1.383577518672690e02,
    -3.066479806614716e01,
    2.506628277459239e00,
)
B = (
    -5.447609879822406e01,
    1.615858368580409e02,
    -1.556989798598866e02,
    6.680131188771972e01,
    -1.328068155288572e01,
)
# Tails, numerator and denominator in sqrt(-2 log(q))
C = (
    -7.784894002430293e-03,
    -3.223964580411365e-01,
    -2.400758277161838e00,
    -2.549732539343734e00,
    4.374664141464968e00,
    2.938163982698783e00,
)
D = (
    7.784695709041462e-03,
    3.224671290700398e-01,
    2.445134137142996e00,
    3.754408661907416e00,
)

_INV_SQRT2 = 0.7071067811865475
_SQRT_2PI = 2.5066282746310002


def _tail(q: float) -> float:
    return (((((C[0] * q + C[1]) * q + C[2]) * q + C[3]) * q + C[4]) * q + C[5]) / (
        (((D[0] * q + D[1]) * q + D[2]) * q + D[3]) * q + 1.0
    )


def probit(d: float) -> float:
    """Map a probability in (0, 1) to a standard normal quantile.

    Arguments
    ---------
        d (float): Should lie strictly between 0 and 1, but any value is
            tolerated. Inputs at or below 0 return -8.375 and inputs at or
            above 1 return 8.375. NaN propagates.

    Returns
    -------
        float: A normal-distributed value in [-8.375, 8.375].
    """
    if d <= 0.0 or d >= 1.0:
        return math.copysign(PROBIT_LIMIT, d - 0.5)
    if d < P_LOW:
        return _tail(math.sqrt(-2.0 * math.log(d)))
    if d > P_HIGH:
        return -_tail(math.sqrt(-2.0 * math.log(1.0 - d)))
    q = d - 0.5
    r = q * q
    return (
        (((((A[0] * r + A[1]) * r + A[2]) * r + A[3]) * r + A[4]) * r + A[5])
        * q
        / (((((B[0] * r + B[1]) * r + B[2]) * r + B[3]) * r + B[4]) * r + 1.0)
    )


def probit_high_precision(d: float) -> float:
    """Same as :func:`probit`, followed by one refinement step.

    The refinement evaluates the CDF at the first estimate through ``erfc``
    and corrects it with a Halley step. It is skipped at 0.5 and outside
    (0, 1), where :func:`probit` is already exact or saturated.

    Arguments
    ---------
        d (float): Should lie between the smallest normal float64 and 1,
            exclusive. Deep subnormal inputs return NaN.

    Returns
    -------
        float: A normal-distributed value centered on 0.0.
    """
    x = probit(d)
    if 0.0 < d < 1.0 and d != 0.5:
        e = 0.5 * erfc(x * -_INV_SQRT2) - d
        try:
            growth = math.exp(x * x * 0.5)
        except OverflowError:
            # the step then yields NaN
            growth = math.inf
        u = e * _SQRT_2PI * growth
        x = x - u / (1.0 + x * u * 0.5)
    return x
