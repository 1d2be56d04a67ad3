"""Internal Bezier evaluation, splitting and nearest-point helpers.

Curves are given as sequences of control points of any degree.
Not intended for public use.
"""

from collections.abc import Sequence

from glyphedit.domain.geometry import Point

# Uniform samples taken before Newton refinement of a nearest-point query
NEAREST_SAMPLES = 32
NEWTON_ITERATIONS = 8
NEWTON_TOLERANCE = 1e-9


def evaluate(ctrl: Sequence[Point], t: float) -> Point:
    """Evaluate a Bezier curve with De Casteljau's algorithm.

    Args:
        ctrl: Control points [p0, ..., pn]
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve at t
    """
    level = list(ctrl)
    while len(level) > 1:
        level = [a.lerp(b, t) for a, b in zip(level, level[1:])]
    return level[0]


def split(ctrl: Sequence[Point], t: float) -> tuple[list[Point], list[Point]]:
    """Split a Bezier curve at t with De Casteljau's algorithm.

    The two halves trace exactly the original curve: the left half covers
    [0, t] and the right half [t, 1].

    Args:
        ctrl: Control points [p0, ..., pn]
        t: Split parameter in [0, 1]

    Returns:
        Control points of the left and right halves
    """
    left = [ctrl[0]]
    right = [ctrl[-1]]
    level = list(ctrl)
    while len(level) > 1:
        level = [a.lerp(b, t) for a, b in zip(level, level[1:])]
        left.append(level[0])
        right.append(level[-1])
    right.reverse()
    return left, right


def _hodograph(ctrl: Sequence[Point]) -> list[Point]:
    # Control points of the derivative curve, stored as points
    n = len(ctrl) - 1
    if n < 1:
        return [Point(0.0, 0.0)]
    return [Point(n * (b.x - a.x), n * (b.y - a.y)) for a, b in zip(ctrl, ctrl[1:])]


def nearest(ctrl: Sequence[Point], point: Point) -> tuple[float, float]:
    """Find the parameter of the curve point closest to ``point``.

    Coarse uniform sampling picks a starting parameter which Newton's method
    then refines on (B(t) - P) . B'(t) = 0. Endpoints are part of the
    sampling, so the result is never worse than either end.

    Args:
        ctrl: Control points of the curve
        point: Query point

    Returns:
        Tuple of (t, squared distance)
    """
    best_t = 0.0
    best_d = evaluate(ctrl, 0.0).distance_squared(point)
    for i in range(1, NEAREST_SAMPLES + 1):
        t = i / NEAREST_SAMPLES
        d = evaluate(ctrl, t).distance_squared(point)
        if d < best_d:
            best_t, best_d = t, d

    d1 = _hodograph(ctrl)
    d2 = _hodograph(d1)
    t = best_t
    for _ in range(NEWTON_ITERATIONS):
        b = evaluate(ctrl, t)
        db = evaluate(d1, t)
        ddb = evaluate(d2, t)
        dx = b.x - point.x
        dy = b.y - point.y
        f = dx * db.x + dy * db.y
        fp = db.x * db.x + db.y * db.y + dx * ddb.x + dy * ddb.y
        if fp == 0.0:
            break
        new_t = min(max(t - f / fp, 0.0), 1.0)
        if abs(new_t - t) < NEWTON_TOLERANCE:
            t = new_t
            break
        t = new_t

    d = evaluate(ctrl, t).distance_squared(point)
    if d < best_d:
        return t, d
    return best_t, best_d
