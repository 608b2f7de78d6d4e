"""
Shape-preserving piecewise cubic Hermite interpolation (Fritsch–Carlson).

Used to read the required thrust loading off a constraint curve at the
design wing loading. Outside the sampled range the curve is extended linearly
along the endpoint tangent.
"""

import math
import sys
from typing import Optional, Sequence

from grading.cells import as_number

_EPSILON = sys.float_info.epsilon


def _sign(v: float) -> int:
    if v == 0:
        return 0
    return 1 if v > 0 else -1


def _clamp_endpoint(value: float, delta0: float, delta1: float) -> float:
    # tangent must agree in sign with its own segment, and may not exceed 3x
    # that slope when the curve turns over at the next node
    if not math.isfinite(value) or delta0 == 0:
        return 0.0
    if _sign(value) != _sign(delta0):
        return 0.0
    if _sign(delta0) != _sign(delta1) and abs(value) > abs(3 * delta0):
        return 3 * delta0
    return value


def _samples(xs: Sequence, ys: Sequence) -> list[list[float]]:
    points = []
    for raw_x, raw_y in zip(xs, ys):
        x, y = as_number(raw_x), as_number(raw_y)
        if x is None or y is None or not math.isfinite(x) or not math.isfinite(y):
            continue
        points.append([x, y])
    points.sort(key=lambda p: p[0])

    unique: list[list[float]] = []
    for point in points:
        if unique and abs(point[0] - unique[-1][0]) <= _EPSILON:
            unique[-1][1] = point[1]
        else:
            unique.append(point)
    return unique


def _tangents(h: list[float], delta: list[float]) -> list[float]:
    n = len(h) + 1
    if n == 2:
        return [delta[0], delta[0]]

    m = [0.0] * n
    m0 = ((2 * h[0] + h[1]) * delta[0] - h[0] * delta[1]) / (h[0] + h[1])
    mn = ((2 * h[n - 2] + h[n - 3]) * delta[n - 2] - h[n - 2] * delta[n - 3]) / (h[n - 2] + h[n - 3])
    m[0] = _clamp_endpoint(m0, delta[0], delta[1])
    m[n - 1] = _clamp_endpoint(mn, delta[n - 2], delta[n - 3])

    for i in range(1, n - 1):
        if delta[i - 1] == 0 or delta[i] == 0 or _sign(delta[i - 1]) != _sign(delta[i]):
            m[i] = 0.0
        else:
            w1 = 2 * h[i] + h[i - 1]
            w2 = h[i] + 2 * h[i - 1]
            m[i] = (w1 + w2) / (w1 / delta[i - 1] + w2 / delta[i])
    return m


def pchip(xs: Sequence, ys: Sequence, x_query) -> Optional[float]:
    """Interpolated y at x_query, or None when the curve is undefined.

    Samples are paired positionally; pairs with an absent or non-finite
    coordinate are dropped and duplicate x values keep the later y. At least
    two distinct x values and a finite query are required.
    """
    points = _samples(xs, ys)
    xq = as_number(x_query)
    if len(points) < 2 or xq is None or not math.isfinite(xq):
        return None

    x = [p[0] for p in points]
    y = [p[1] for p in points]
    n = len(points)

    h: list[float] = []
    delta: list[float] = []
    for i in range(n - 1):
        dx = x[i + 1] - x[i]
        if dx == 0:
            return None
        h.append(dx)
        delta.append((y[i + 1] - y[i]) / dx)

    m = _tangents(h, delta)

    if xq <= x[0]:
        return y[0] + m[0] * (xq - x[0])
    if xq >= x[n - 1]:
        return y[n - 1] + m[n - 1] * (xq - x[n - 1])

    idx = 0
    while idx < n - 2 and xq > x[idx + 1]:
        idx += 1

    t = (xq - x[idx]) / h[idx]
    t2 = t * t
    t3 = t2 * t

    h00 = 2 * t3 - 3 * t2 + 1
    h10 = t3 - 2 * t2 + t
    h01 = -2 * t3 + 3 * t2
    h11 = t3 - t2

    return h00 * y[idx] + h10 * h[idx] * m[idx] + h01 * y[idx + 1] + h11 * h[idx] * m[idx + 1]
