#!/usr/bin/env python3
"""Portfolio design generator -- CLI Interface.

Commands:
    generate  Build one template from a seed and a profile, write it as JSON
    batch     Build several templates from derived seeds and a preview grid
    catalog   Show organism counts per section type

Usage:
    python -m designgen.main generate --seed abc --industry technology [--preview]
    python -m designgen.main batch --count 8 --profession "UX Designer"
    python -m designgen.main catalog
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from designgen.art.animation import ANIMATION_STYLES, STYLE_ALIASES
from designgen.art.palettes import TASTE_CATEGORIES
from designgen.layout.synth import LAYOUT_STYLES
from designgen.render.preview import render_template, render_template_grid
from designgen.template.generator import TemplateGenerator, new_seed
from designgen.template.model import GenerationOptions, UserPreferences, UserProfile

OUTPUT_DIR = Path("output")


def _add_profile_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--base", default=None, help="Base template name (default: modern)")
    p.add_argument("--profession", default="", help="Profession, e.g. 'Senior Developer'")
    p.add_argument("--industry", default="", help="Industry, e.g. 'technology'")
    p.add_argument("--experience", default="", help="Experience descriptor")
    p.add_argument("--skill", action="append", default=[], help="Skill (repeatable)")
    p.add_argument("--color-scheme", choices=TASTE_CATEGORIES, default=None,
                   help="Taste category override for the palette")
    p.add_argument("--layout-style", choices=LAYOUT_STYLES, default=None)
    p.add_argument("--animation-style",
                   choices=sorted(set(ANIMATION_STYLES) | set(STYLE_ALIASES)), default=None)
    p.add_argument("--no-randomize-colors", action="store_true")
    p.add_argument("--no-randomize-layout", action="store_true")
    p.add_argument("--no-randomize-animations", action="store_true")
    p.add_argument("--no-randomize-components", action="store_true")
    p.add_argument("--ai", action="store_true", help="Mark template as AI enhanced")
    p.add_argument("--out", type=Path, default=OUTPUT_DIR, help="Output directory (default: output)")


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Procedural portfolio design generator")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate one template")
    _add_profile_args(gen)
    gen.add_argument("--seed", default=None, help="Seed (default: fresh random seed)")
    gen.add_argument("--preview", action="store_true", help="Also write a PNG preview")
    gen.add_argument("--preview-size", type=int, default=320, help="Preview width (default: 320)")

    batch = sub.add_parser("batch", help="Generate several templates and a preview grid")
    _add_profile_args(batch)
    batch.add_argument("--seed", default=None, help="Seed prefix (default: fresh random seed)")
    batch.add_argument("--count", type=int, default=8, help="Number of templates (default: 8)")
    batch.add_argument("--thumb-size", type=int, default=160, help="Thumbnail width (default: 160)")

    sub.add_parser("catalog", help="Show organism counts per section type")
    return p.parse_args(argv)


def build_profile(args) -> UserProfile:
    return UserProfile(
        profession=args.profession,
        industry=args.industry,
        experience=args.experience,
        skills=tuple(args.skill),
        preferences=UserPreferences(
            color_scheme=args.color_scheme,
            layout_style=args.layout_style,
            animation_style=args.animation_style,
        ),
    )


def build_options(args) -> GenerationOptions:
    return GenerationOptions(
        randomize_colors=not args.no_randomize_colors,
        randomize_layout=not args.no_randomize_layout,
        randomize_animations=not args.no_randomize_animations,
        randomize_components=not args.no_randomize_components,
        ai_enhancement=args.ai,
    )


def _run_generate(args, generator: TemplateGenerator) -> int:
    template = generator.generate(args.base, build_profile(args), build_options(args), seed=args.seed)
    meta = template.metadata

    args.out.mkdir(parents=True, exist_ok=True)
    json_path = args.out / f"{template.id}.json"
    json_path.write_text(template.to_json())

    print(f"=== {template.name} ===")
    print(f"Seed: {meta.seed!r} | Uniqueness: {meta.uniqueness_score:.2f} | "
          f"Performance: {meta.performance_score}")
    print(f"Sections: {' -> '.join(template.customization.components.types())}")
    print(f"Saved to: {json_path}")

    if args.preview:
        png_path = args.out / f"{template.id}.png"
        render_template(template, args.preview_size).save(png_path)
        print(f"Preview saved to: {png_path}")
    return 0


def _run_batch(args, generator: TemplateGenerator) -> int:
    if args.count < 1:
        print("Error: --count must be at least 1")
        return 1
    prefix = args.seed or new_seed()
    profile = build_profile(args)
    options = build_options(args)

    templates = [
        generator.generate(args.base, profile, options, seed=f"{prefix}-{i}")
        for i in range(args.count)
    ]

    args.out.mkdir(parents=True, exist_ok=True)
    for i, t in enumerate(templates):
        (args.out / f"{t.id}.json").write_text(t.to_json())
        print(f"  [{i:2d}] {t.id}  uniqueness={t.metadata.uniqueness_score:6.2f}  "
              f"performance={t.metadata.performance_score}")

    grid_path = args.out / f"batch_{prefix}.png"
    render_template_grid(templates, thumb_size=args.thumb_size).save(grid_path)
    print(f"Grid saved to: {grid_path}")
    return 0


def _run_catalog(generator: TemplateGenerator) -> int:
    catalog = generator.tables.catalog
    print(json.dumps(catalog.counts(), indent=2))
    print(f"Organisms: {len(catalog)} | Combinations: {catalog.total_combinations():,}")
    return 0


def main(argv=None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    generator = TemplateGenerator()

    try:
        if args.command == "generate":
            return _run_generate(args, generator)
        if args.command == "batch":
            return _run_batch(args, generator)
        return _run_catalog(generator)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
