"""Fast rational probit approximations in float64 and float32.

Uses Paul Voutier's "A New Approximation to the Normal Distribution Quantile
Function", see
https://www.researchgate.net/publication/46462650_A_New_Approximation_to_the_Normal_Distribution_Quantile_Function

The central region is a single rational function of ``q**2`` with
``q = p - 0.5``; the tails are reparameterized as ``r = sqrt(log(1 / q**2))``.
Thresholds and coefficients were fit together and
must only be changed as a set.

A tiny constant is added to ``q**2`` before the logarithm, which avoids
``log(0)`` and fixes the extreme outputs: about +/-26.4838 for
:func:`probit_d` and +/-9.0802 for :func:`probit_f`.
"""

import math

import numpy as np

# Central region
A0 = 0.195740115269792
A1 = -0.652871358365296
A2 = 1.246899760652504
B0 = 0.155331081623168
B1 = -0.839293158122257
# Tails
C0 = 16.682320830719986527
C1 = 4.120411523939115059
C2 = 0.029814187308200211
C3 = -1.000182518730158122
D0 = 7.173787663925508066
D1 = 8.759693508958633869

P_LOW = 0.0465
P_HIGH = 0.9535

# Added to q**2 in the tails; -log of each is the largest log(1 / q**2) used
TAIL_EPS = 2.0**-1024
TAIL_EPS_F = 2.0**-128

A0_F, A1_F, A2_F = np.float32(A0), np.float32(A1), np.float32(A2)
B0_F, B1_F = np.float32(B0), np.float32(B1)
C0_F, C1_F, C2_F, C3_F = np.float32(C0), np.float32(C1), np.float32(C2), np.float32(C3)
D0_F, D1_F = np.float32(D0), np.float32(D1)
P_LOW_F = np.float32(P_LOW)
P_HIGH_F = np.float32(P_HIGH)
_HALF_F = np.float32(0.5)
_ONE_F = np.float32(1.0)
_ZERO_F = np.float32(0.0)


def _tail_d(q: float) -> float:
    r = math.sqrt(-math.log(q * q + TAIL_EPS))
    return C3 * r + C2 + (C1 * r + C0) / (r * (r + D1) + D0)


def _central_d(h: float) -> float:
    r = h * h
    return h * (A2 + (A1 * r + A0) / (r * (r + B1) + B0))


def _tail_f(q: np.float32) -> np.float32:
    qd = float(q)
    r = np.float32(math.sqrt(-math.log(qd * qd + TAIL_EPS_F)))
    return C3_F * r + C2_F + (C1_F * r + C0_F) / (r * (r + D1_F) + D0_F)


def _central_f(h: np.float32) -> np.float32:
    r = h * h
    return h * (A2_F + (A1_F * r + A0_F) / (r * (r + B1_F) + B0_F))


def lower_side_d(q: float) -> float:
    """Quantile for a lower-tail probability ``q`` in [0, 0.5], as a float64.

    The result is never positive; the upper half of the distribution is the
    negation of this for ``1 - p``.
    """
    if q < P_LOW:
        return _tail_d(q)
    return _central_d(q - 0.5)


def lower_side_f(q: np.float32) -> np.float32:
    """Quantile for a lower-tail probability ``q`` in [0, 0.5], as a float32."""
    if q < P_LOW_F:
        return _tail_f(q)
    return _central_f(q - _HALF_F)


def probit_d(p: float) -> float:
    """Map a probability to a standard normal quantile, in float64.

    Arguments
    ---------
        p (float): Probability in [0, 1]. Values at or below 0 and at or above
            1 saturate to the extremes. NaN propagates.

    Returns
    -------
        float: A value in [-26.4838, 26.4838]; exactly 0.0 for p = 0.5.
    """
    if p > P_HIGH:
        return -_tail_d(max(1.0 - p, 0.0))
    if p < P_LOW:
        return _tail_d(max(p, 0.0))
    return _central_d(p - 0.5)


def probit_f(p: float) -> np.float32:
    """Map a probability to a standard normal quantile, in float32.

    Arguments
    ---------
        p (float): Probability in [0, 1], rounded to float32 first. Values at
            or below 0 and at or above 1 saturate to the extremes.

    Returns
    -------
        np.float32: A value in [-9.0802, 9.0802]; exactly 0.0 for p = 0.5.
    """
    p = np.float32(p)
    if p > P_HIGH_F:
        return -_tail_f(max(_ONE_F - p, _ZERO_F))
    if p < P_LOW_F:
        return _tail_f(max(p, _ZERO_F))
    return _central_f(p - _HALF_F)
