"""Pack circles into the edge-free areas of an image and emit them as spheres."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

import numpy as np

from raysketch.ppm import PpmImage, read_ppm

VIEWPORT_HEIGHT = 2.0
EDGE_THRESHOLD = 30
MIN_RADIUS = 6
STEP = 8

_HEADER = "// Spheres generated from circles\n"


@dataclass(frozen=True)
class Circle:
    """A circle in viewport coordinates with an RGB colour in [0, 1]."""

    x: float
    y: float
    r: float
    cr: float
    cg: float
    cb: float


def threshold_edges(edges, threshold: int = EDGE_THRESHOLD) -> np.ndarray:
    """Mask of pixels whose integer mean intensity exceeds ``threshold``."""
    pixels = np.asarray(edges, dtype=int)
    return pixels.sum(axis=2) // 3 > threshold


def _disk(shape: tuple[int, ...], x: int, y: int, r: int):
    h, w = shape[0], shape[1]
    y0, y1 = max(0, y - r), min(h, y + r + 1)
    x0, x1 = max(0, x - r), min(w, x + r + 1)
    dy = np.arange(y0, y1)[:, None] - y
    dx = np.arange(x0, x1)[None, :] - x
    return (slice(y0, y1), slice(x0, x1)), dx * dx + dy * dy <= r * r


def can_place(mask: np.ndarray, x: int, y: int, r: int) -> bool:
    """True if the bounding square fits the image and the disk covers no set pixel."""
    h, w = mask.shape
    if x - r < 0 or y - r < 0 or x + r >= w or y + r >= h:
        return False
    region, disk = _disk(mask.shape, x, y, r)
    return not (mask[region] & disk).any()


def mark_circle(mask: np.ndarray, x: int, y: int, r: int) -> None:
    """Set every in-bounds pixel of the disk in ``mask``."""
    region, disk = _disk(mask.shape, x, y, r)
    mask[region] |= disk


def avg_color(img, x: int, y: int, r: int) -> tuple[float, float, float]:
    """Mean colour over the in-bounds disk, scaled by 255; white if the disk is empty."""
    pixels = np.asarray(img, dtype=float)
    region, disk = _disk(pixels.shape, x, y, r)
    samples = pixels[region][disk]
    if len(samples) == 0:
        return (1.0, 1.0, 1.0)
    r_avg, g_avg, b_avg = samples.mean(axis=0) / 255.0
    return (float(r_avg), float(g_avg), float(b_avg))


def find_circles(edges: PpmImage, img: PpmImage) -> list[Circle]:
    """Greedily place the largest edge-free circles on a grid of candidate centres."""
    if (edges.width, edges.height) != (img.width, img.height):
        raise ValueError("edge and original images have different dimensions")
    w, h = edges.width, edges.height
    viewport_width = VIEWPORT_HEIGHT * (float(w) / h)
    covered = threshold_edges(edges.pixels)
    max_r = min(w, h) // 6

    circles: list[Circle] = []
    for y in range(0, h, STEP):
        for x in range(0, w, STEP):
            if covered[y, x]:
                continue
            for r in range(max_r, MIN_RADIUS - 1, -1):
                if can_place(covered, x, y, r):
                    cr, cg, cb = avg_color(img.pixels, x, y, r)
                    x_vp = (float(x) / w) * viewport_width - viewport_width / 2.0
                    y_vp = -((float(y) / h) * VIEWPORT_HEIGHT - VIEWPORT_HEIGHT / 2.0)
                    circles.append(Circle(x_vp, y_vp, r * viewport_width / w, cr, cg, cb))
                    mark_circle(covered, x, y, r)
                    break
    return circles


def format_spheres(circles: Iterable[Circle]) -> str:
    """Scene source lines adding one diffuse sphere per circle at z = -1."""
    lines = [
        f"world.add(make_shared<sphere>(point3({c.x:g}, {c.y:g}, -1), {c.r:g}, "
        f"make_shared<lambertian>(color({c.cr:g}, {c.cg:g}, {c.cb:g}))));\n"
        for c in circles
    ]
    return _HEADER + "".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """Generate sphere definitions from an edge image and the original image."""
    parser = argparse.ArgumentParser(
        description="Pack circles into edge-free areas and write them as spheres."
    )
    parser.add_argument("edges", help="edge image (P3)")
    parser.add_argument("original", help="original image (P3)")
    parser.add_argument("output", help="file to write the sphere definitions to")
    args = parser.parse_args(argv)

    try:
        with open(args.edges, encoding="utf-8") as f:
            edges = read_ppm(f)
        with open(args.original, encoding="utf-8") as f:
            img = read_ppm(f)
        circles = find_circles(edges, img)
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(format_spheres(circles))
    except (OSError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    print(f"Generated {len(circles)} spheres in {args.output}")
    return 0