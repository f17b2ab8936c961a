#!/usr/bin/env python3
"""Inspect themes: token scales, resolved template context and CSS variables."""

import json
import sys
from dataclasses import asdict

from slide_engine.themes import load_themes, find_theme_issues
from slide_engine.theme_resolver import resolve


def inspect_themes(themes_path: str | None = None):
    """Dump theme structure to stdout and return it as a dict."""
    themes = load_themes(themes_path)

    result = {
        "themes_path": themes_path or "built-in",
        "themes": []
    }

    print(f"=== Themes: {result['themes_path']} ===")
    print(f"Theme count: {len(themes)}")
    print()

    for theme in themes:
        context = resolve(theme)
        context_data = asdict(context)
        # the CSS block is large; report its size only
        variables = context_data.pop("variables")

        theme_data = {
            "id": theme.id,
            "name": theme.name,
            "tone": theme.tone,
            "category": theme.category,
            "price": theme.price,
            "issues": find_theme_issues(theme),
            "context": context_data,
            "css_variable_count": variables.count("--"),
        }

        print(f"--- {theme.id}: \"{theme.name}\" ({theme.tone}, {theme.category}) ---")
        print(f"  Colors: primary={context.colors.primary} text={context.colors.text} bg={context.colors.bg}")
        print(f"  Fonts: {context.fonts.main}")
        sizes = context.fonts.size
        print(f"    title={sizes.title}px heading={sizes.heading}px body={sizes.body}px small={sizes.small}px")
        print(f"  Spacing: padding={context.spacing.padding}px gap={context.spacing.gap}px "
              f"gap_small={context.spacing.gap_small}px")
        print(f"  Card: radius={context.card.radius}px padding={context.card.padding}px shadow={context.card.shadow}")
        print(f"  CSS variables: {theme_data['css_variable_count']}")
        for issue in theme_data["issues"]:
            print(f"  ! {issue}")
        print()

        result["themes"].append(theme_data)

    return result


if __name__ == "__main__":
    themes_path = sys.argv[1] if len(sys.argv) > 1 else None

    result = inspect_themes(themes_path)

    if len(sys.argv) > 2:
        output_path = sys.argv[2]
        with open(output_path, "w", encoding="utf-8") as f:
            json.dump(result, f, indent=2)
        print(f"\nJSON output written to: {output_path}")
