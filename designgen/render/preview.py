"""Render generated templates to wireframe preview thumbnails.

A preview is a page-shaped PIL image: header strip, one band per planned
section in page order, footer strip and a swatch row showing the whole
palette.  Bands take their width and alignment from the layout's
section entries; the hero band is a vertical primary-to-secondary
gradient.  Previews are for pickers and galleries only, the real markup
comes from the stylesheet compiler.
"""

from __future__ import annotations

import base64
import io

import numpy as np
from PIL import Image, ImageDraw

from designgen.art.palettes import get_palette_array, hex_to_rgb
from designgen.template.model import GeneratedTemplate

WIDTH_FRACTIONS = {"full": 1.0, "half": 0.5, "third": 1.0 / 3.0}

_HEADER_H = 0.05
_FOOTER_H = 0.05
_SWATCH_H = 0.06
_HERO_WEIGHT = 2.0


def _vertical_gradient(width: int, height: int, top: str, bottom: str) -> Image.Image:
    t = np.linspace(0.0, 1.0, max(height, 1), dtype=np.float32)[:, None, None]
    a = np.array(hex_to_rgb(top), dtype=np.float32)[None, None, :]
    b = np.array(hex_to_rgb(bottom), dtype=np.float32)[None, None, :]
    arr = a * (1.0 - t) + b * t
    arr = np.broadcast_to(arr, (max(height, 1), max(width, 1), 3))
    return Image.fromarray(np.clip(arr, 0, 255).astype(np.uint8))


def _band_x(width: int, fraction: float, alignment: str, margin: int) -> tuple[int, int]:
    inner = width - 2 * margin
    band_w = max(1, int(inner * fraction))
    if alignment == "right":
        x0 = width - margin - band_w
    elif alignment == "center":
        x0 = margin + (inner - band_w) // 2
    else:
        x0 = margin
    return x0, x0 + band_w


def _draw_text_lines(draw: ImageDraw.ImageDraw, x0: int, x1: int, y0: int, y1: int,
                     color: tuple[int, int, int], accent: tuple[int, int, int]) -> None:
    """Placeholder heading, accent rule and body lines inside a band."""
    pad = max(2, (y1 - y0) // 8)
    line_h = max(1, (y1 - y0) // 14)
    span = x1 - x0 - 2 * pad
    if span <= 4:
        return
    y = y0 + pad
    draw.rectangle([x0 + pad, y, x0 + pad + int(span * 0.45), y + line_h * 2], fill=color)
    y += line_h * 3
    draw.rectangle([x0 + pad, y, x0 + pad + int(span * 0.15), y + max(1, line_h // 2)], fill=accent)
    y += line_h * 2
    for frac in (0.9, 0.8, 0.6):
        if y + line_h > y1 - pad:
            break
        draw.rectangle([x0 + pad, y, x0 + pad + int(span * frac), y + line_h], fill=color)
        y += line_h * 2


def render_template(template: GeneratedTemplate, width: int = 320,
                    height: int | None = None) -> Image.Image:
    if height is None:
        height = int(width * 1.6)

    custom = template.customization
    colors = custom.colors
    bg = hex_to_rgb(colors.background)
    surface = hex_to_rgb(colors.surface)
    muted = hex_to_rgb(colors.text_muted)
    accent = hex_to_rgb(colors.accent)

    canvas = Image.new("RGB", (width, height), bg)
    draw = ImageDraw.Draw(canvas)

    header_h = int(height * _HEADER_H)
    footer_h = int(height * _FOOTER_H)
    swatch_h = int(height * _SWATCH_H)
    draw.rectangle([0, 0, width, header_h], fill=surface)
    draw.rectangle([width - width // 5, header_h // 3, width - width // 20, 2 * header_h // 3],
                   fill=hex_to_rgb(colors.primary))

    body_top = header_h
    body_bottom = height - footer_h - swatch_h
    sections = list(custom.components)
    layouts = {s.type: s for s in custom.layout.sections}
    weights = [_HERO_WEIGHT if s.type == "hero" else 1.0 for s in sections]
    total = sum(weights) or 1.0
    margin = max(2, width // 32)
    gap = max(1, height // 200)

    y = body_top
    for section, weight in zip(sections, weights):
        band_h = int((body_bottom - body_top) * weight / total)
        y0, y1 = y + gap, y + band_h - gap
        y += band_h
        if y1 <= y0:
            continue

        entry = layouts.get(section.type)
        fraction = WIDTH_FRACTIONS.get(entry.width, 1.0) if entry else 1.0
        alignment = entry.alignment if entry else "center"

        if section.type == "hero":
            grad = _vertical_gradient(width, y1 - y0, colors.primary, colors.secondary)
            canvas.paste(grad, (0, y0))
            x0, x1 = _band_x(width, fraction, alignment, margin)
            _draw_text_lines(draw, x0, x1, y0, y1, hex_to_rgb(colors.text), accent)
        else:
            x0, x1 = _band_x(width, fraction, alignment, margin)
            draw.rectangle([x0, y0, x1, y1], fill=surface)
            _draw_text_lines(draw, x0, x1, y0, y1, muted, accent)

    draw.rectangle([0, body_bottom, width, body_bottom + footer_h], fill=surface)

    swatches = (get_palette_array(colors) * 255).round().astype(np.uint8)
    strip = np.repeat(swatches[None, :, :], max(swatch_h, 1), axis=0)
    strip = Image.fromarray(strip).resize((width, max(swatch_h, 1)), Image.NEAREST)
    canvas.paste(strip, (0, height - swatch_h))

    return canvas


def render_template_grid(templates: list[GeneratedTemplate], thumb_size: int = 160,
                         cols: int = 4) -> Image.Image:
    n = len(templates)
    rows = max(1, (n + cols - 1) // cols)
    padding = 4
    label_h = 18
    thumb_h = int(thumb_size * 1.6)
    cell_w = thumb_size + padding * 2
    cell_h = thumb_h + padding * 2 + label_h
    grid = Image.new("RGB", (cols * cell_w + padding, rows * cell_h + padding), (30, 30, 30))
    draw = ImageDraw.Draw(grid)

    for i, t in enumerate(templates):
        row, col_idx = divmod(i, cols)
        img = render_template(t, thumb_size, thumb_h)
        x = col_idx * cell_w + padding
        y = row * cell_h + padding + label_h
        grid.paste(img, (x, y))
        draw.text((x + 2, y - label_h + 2), f"#{i} {t.unique_id[:6]}", fill=(180, 180, 180))

    return grid


def image_to_base64(img: Image.Image) -> str:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return base64.b64encode(buf.getvalue()).decode("ascii")


def image_to_png(img: Image.Image) -> bytes:
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
