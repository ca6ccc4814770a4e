"""
PyOriel - geometry.py
Outline calculations for drawing commands

(c) 2026 The PyOriel Authors
This file is released under the GNU GPL version 3 or later.
"""

import math


TAU = 2 * math.pi

# angle increment when tracing arcs, in radians
ARC_STEP = 0.1

# pixels per millimetre in metric coordinates, for a 96 dpi display
METRIC_SCALE = 96 / 25.4

# on/off lengths of dashed pen styles, in pixels
PEN_DASHES = {
    u'SOLID': (),
    u'DASH': (24, 8),
    u'DOT': (4, 4),
    u'DASHDOT': (12, 6, 3, 6),
    u'DASHDOTDOT': (12, 3, 3, 3, 3, 3),
}


def arc_points(cx, cy, rx, ry, start, end):
    """Points along an elliptic arc traced from angle start down to angle end."""
    points = [(cx + rx * math.cos(start), cy + ry * math.sin(start))]
    theta = start if start > end else start + TAU
    while theta > end:
        points.append((cx + rx * math.cos(theta), cy + ry * math.sin(theta)))
        theta -= ARC_STEP
    points.append((cx + rx * math.cos(end), cy + ry * math.sin(end)))
    return points


def bounded_arc(x1, y1, x2, y2, x3, y3, x4, y4):
    """
    Arc of the ellipse inscribed in rectangle (x1, y1)-(x2, y2), from the ray
    through (x3, y3) to the ray through (x4, y4); returns (centre, points).
    """
    cx, cy = (x1 + x2) / 2., (y1 + y2) / 2.
    rx, ry = (x2 - x1) / 2., (y2 - y1) / 2.
    if not rx or not ry:
        # degenerate ellipse
        return (cx, cy), [(x1, y1), (x2, y2)]
    start = math.atan2((y3 - cy) / ry, (x3 - cx) / rx)
    end = math.atan2((y4 - cy) / ry, (x4 - cx) / rx)
    return (cx, cy), arc_points(cx, cy, rx, ry, start, end)


def ellipse_points(x1, y1, x2, y2):
    """Closed outline of the ellipse inscribed in a rectangle."""
    cx, cy = (x1 + x2) / 2., (y1 + y2) / 2.
    return arc_points(cx, cy, (x2 - x1) / 2., (y2 - y1) / 2., TAU, 0.)


def rectangle_points(x1, y1, x2, y2):
    """Closed outline of a rectangle."""
    return [(x1, y1), (x2, y1), (x2, y2), (x1, y2), (x1, y1)]


def round_rectangle_points(x1, y1, x2, y2, width, height):
    """Closed outline of a rectangle with elliptic corners of the given size."""
    x1, x2 = min(x1, x2), max(x1, x2)
    y1, y2 = min(y1, y2), max(y1, y2)
    # corners can't be larger than the rectangle
    rx = min(width, x2 - x1) / 2.
    ry = min(height, y2 - y1) / 2.
    half_pi = math.pi / 2
    points = []
    points += arc_points(x1 + rx, y1 + ry, rx, ry, 3 * half_pi, 2 * half_pi)
    points += arc_points(x1 + rx, y2 - ry, rx, ry, 2 * half_pi, half_pi)
    points += arc_points(x2 - rx, y2 - ry, rx, ry, half_pi, 0.)
    points += arc_points(x2 - rx, y1 + ry, rx, ry, 0., -half_pi)
    points.append(points[0])
    return points


def dash_segments(points, pattern):
    """Split a polyline into the visible segments of a dash pattern."""
    if not pattern:
        return [list(points)]
    segments = []
    index, left, visible = 0, pattern[0], True
    current = [points[0]] if points else []
    for (xa, ya), (xb, yb) in zip(points[:-1], points[1:]):
        length = math.hypot(xb - xa, yb - ya)
        done = 0.
        while length - done > left:
            done += left
            point = (xa + (xb - xa) * done / length, ya + (yb - ya) * done / length)
            if visible:
                current.append(point)
                segments.append(current)
            current = [point]
            visible = not visible
            index = (index + 1) % len(pattern)
            left = pattern[index]
        left -= length - done
        if visible:
            current.append((xb, yb))
        else:
            current = [(xb, yb)]
    if visible and len(current) > 1:
        segments.append(current)
    return segments


def program_scale(coordinates):
    """Pixels per program unit for a coordinate system token."""
    if coordinates == u'METRIC':
        return METRIC_SCALE
    return 1.
