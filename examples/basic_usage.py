"""Basic curvecalc usage examples.

Run directly with:
    python examples/basic_usage.py

Drawing needs Pillow (``pip install -e .[examples]``).
"""
import numpy as np
from PIL import Image, ImageDraw

from curvecalc import interpolate, CardinalSpline

STAR = [
    200, 40, 240, 150, 360, 150, 265, 220, 300, 340,
    200, 270, 100, 340, 135, 220, 40, 150, 160, 150,
]


def demonstrate_curves() -> None:
    # Open curve through four corners of a square.
    curve = interpolate([0, 0, 100, 0, 100, 100, 0, 100], tension=0.5, segments_per_span=4)
    print("Open curve points:", len(curve) // 2)
    print("First and last:", curve[:2], curve[-2:])

    # Same points as a loop.
    loop = interpolate([0, 0, 100, 0, 100, 100, 0, 100], segments_per_span=4, closed=True)
    print("Closed curve points:", len(loop) // 2)


def draw_tensions(path: str = "tensions.png") -> None:
    # One outline per tension, all sharing the same resolution.
    canvas = Image.new("RGB", (400, 380), (255, 255, 255))
    draw = ImageDraw.Draw(canvas)

    base = CardinalSpline(segments_per_span=20, closed=True)
    colors = [(220, 60, 60), (60, 160, 60), (60, 60, 220)]
    for tension, color in zip((0.0, 0.5, 1.0), colors):
        outline = base.with_options(tension=tension)(STAR)
        draw.line([tuple(p) for p in np.asarray(outline).reshape(-1, 2)], fill=color, width=2)

    for x, y in np.asarray(STAR).reshape(-1, 2):
        draw.ellipse((x - 3, y - 3, x + 3, y + 3), fill=(0, 0, 0))

    canvas.save(path)
    print(f"Saved {path}")


if __name__ == "__main__":
    demonstrate_curves()
    draw_tensions()
