"""Advisory scores attached to every generated template.

Neither score is a quality judgement.  ``uniqueness_score`` is a cheap
checksum dispersion used for display, it is not collision resistant and
must not be used to deduplicate templates.  ``performance_score`` knocks
points off designs that are heavier to render.
"""

from __future__ import annotations

import json

import numpy as np

from designgen.template.model import AnimationConfig, ColorPalette, LayoutConfig

PERFORMANCE_FLOOR = 70
PERFORMANCE_CEILING = 100


def canonical(obj) -> str:
    return json.dumps(obj, separators=(",", ":"), ensure_ascii=False)


def checksum_score(text: str) -> int:
    """Sum of UTF-16 code units, mod 100."""
    units = np.frombuffer(text.encode("utf-16-le", "surrogatepass"), dtype="<u2")
    return int(units.sum(dtype=np.int64) % 100)


def uniqueness_score(colors: ColorPalette, layout: LayoutConfig,
                     animations: AnimationConfig) -> float:
    parts = [
        "".join(v for _, v in colors.items()),
        canonical(layout.to_dict()),
        canonical(animations.to_dict()),
    ]
    score = float(np.mean([checksum_score(p) for p in parts]))
    return round(max(0.0, min(100.0, score)), 2)


def performance_score(layout: LayoutConfig, animations: AnimationConfig,
                      component_count: int) -> int:
    score = PERFORMANCE_CEILING

    if animations.enabled and animations.style == "bounce":
        score -= 10

    if layout.container == "grid" and len(layout.sections) > 5:
        score -= 5

    if component_count > 6:
        score -= 5

    return max(PERFORMANCE_FLOOR, score)
