# components/pil_backend.py
from __future__ import annotations

import io
import math

from PIL import Image, ImageDraw
from PySide6.QtCore import QPointF, QRectF

from components.paint import CAP_ROUND, PaintBackend, SolidPaint, SweepGradientPaint
from components.utils import to_rgba

# Gradient arcs are drawn as short segments of this many degrees.
SEGMENT_DEGREES = 2.0


class PillowBackend(PaintBackend):
    """
    Rasterizes gauge commands onto an RGBA Pillow image (headless snapshots).

    ImageDraw angles are already canvas angles (clockwise from 3 o'clock).
    Pillow writes fill values straight into RGBA pixels, which is the overwrite mode
    the handle needs; arcs are composited so antialiased edges of the
    foreground blend over the background.
    """

    def __init__(self, width: int, height: int):
        self.image = Image.new("RGBA", (max(1, int(width)), max(1, int(height))), (0, 0, 0, 0))

    def clear(self) -> None:
        self.image.paste((0, 0, 0, 0), (0, 0, self.image.width, self.image.height))

    def _arc_layer(self, bounds: QRectF, start: float, sweep: float, width: float, fill) -> Image.Image:
        start = start % 360.0
        layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
        draw = ImageDraw.Draw(layer)
        half = width / 2
        # Pillow grows the stroke inward from the box; center it on the circle instead.
        box = [bounds.left() - half, bounds.top() - half, bounds.right() + half, bounds.bottom() + half]
        draw.arc(box, start, start + sweep, fill=fill, width=max(1, int(round(width))))
        return layer

    def _cap(self, draw: ImageDraw.ImageDraw, bounds: QRectF, angle: float, width: float, fill) -> None:
        center = bounds.center()
        r = bounds.width() / 2
        a = math.radians(angle)
        x = center.x() + r * math.cos(a)
        y = center.y() + r * math.sin(a)
        half = width / 2
        draw.ellipse([x - half, y - half, x + half, y + half], fill=fill)

    def stroke_arc(self, bounds, start_angle, sweep_angle, stroke_width, cap, paint) -> None:
        if isinstance(paint, SweepGradientPaint):
            steps = max(1, int(math.ceil(sweep_angle / SEGMENT_DEGREES)))
            step = sweep_angle / steps
            for i in range(steps):
                seg_start = start_angle + i * step
                color = to_rgba(paint.color_at(seg_start + step / 2))
                # Overlap segments slightly so no seams show between them.
                layer = self._arc_layer(bounds, seg_start, step + 0.5, stroke_width, color)
                self.image.alpha_composite(layer)
            start_fill = to_rgba(paint.color_at(start_angle))
            end_fill = to_rgba(paint.color_at(start_angle + sweep_angle))
        else:
            fill = to_rgba(paint.color)
            self.image.alpha_composite(self._arc_layer(bounds, start_angle, sweep_angle, stroke_width, fill))
            start_fill = end_fill = fill

        if cap == CAP_ROUND:
            layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
            draw = ImageDraw.Draw(layer)
            self._cap(draw, bounds, start_angle, stroke_width, start_fill)
            self._cap(draw, bounds, start_angle + sweep_angle, stroke_width, end_fill)
            self.image.alpha_composite(layer)

    def fill_circle(self, center: QPointF, radius: float, paint: SolidPaint) -> None:
        box = [center.x() - radius, center.y() - radius, center.x() + radius, center.y() + radius]
        fill = to_rgba(paint.color)
        if paint.overwrite:
            ImageDraw.Draw(self.image).ellipse(box, fill=fill)
        else:
            layer = Image.new("RGBA", self.image.size, (0, 0, 0, 0))
            ImageDraw.Draw(layer).ellipse(box, fill=fill)
            self.image.alpha_composite(layer)

    def to_png(self) -> bytes:
        buffer = io.BytesIO()
        self.image.save(buffer, format="PNG")
        return buffer.getvalue()
