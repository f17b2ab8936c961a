"""Command-line interface for the slide engine."""

import argparse
import sys
import logging
from pathlib import Path
from typing import Optional, Sequence

from .aspect_ratio import ASPECT_RATIOS
from .config import Config
from .engine import build_default_engine
from .errors import SlideEngineError
from .generator import DeckGenerator


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Parsed arguments
    """
    parser = argparse.ArgumentParser(
        description='Render a slide document (JSON/YAML) into a themed HTML deck.'
    )

    # Config file path
    parser.add_argument(
        '--config',
        default='configs/config.yaml',
        help='Path to configuration file (default: configs/config.yaml)'
    )

    parser.add_argument(
        '--document',
        help='Path to slide document file (overrides config)'
    )

    parser.add_argument(
        '--template',
        help='Template id to render with (overrides config)'
    )

    parser.add_argument(
        '--aspect-ratio',
        choices=list(ASPECT_RATIOS),
        help='Canvas aspect ratio (overrides config and document)'
    )

    parser.add_argument(
        '--output',
        help='Path to output HTML file (overrides config)'
    )

    parser.add_argument(
        '--list-templates',
        action='store_true',
        help='List available templates and exit'
    )

    return parser.parse_args(argv)


def list_templates(config: Optional[Config]) -> int:
    """Print every registered template."""
    themes_path = config.themes_path if config is not None else None
    engine = build_default_engine(themes_path)
    print(engine.get_registry().describe())
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the CLI.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)

    if args.list_templates:
        try:
            config = Config(args.config) if Path(args.config).exists() else None
            return list_templates(config)
        except (FileNotFoundError, SlideEngineError) as e:
            print(f"Error: {e}")
            return 1

    # Load configuration
    try:
        config = Config(args.config)
    except FileNotFoundError as e:
        print(f"Error: {e}")
        print(f"Please ensure the configuration file exists at: {args.config}")
        return 1
    except Exception as e:
        print(f"Error loading configuration: {e}")
        return 1

    # Apply CLI overrides if provided
    if args.document:
        config.override('paths.document', str(Path(args.document).resolve()))
    if args.output:
        config.override('paths.output', str(Path(args.output).resolve()))
    if args.template:
        config.override('settings.template', args.template)
    if args.aspect_ratio:
        config.override('settings.aspect_ratio', args.aspect_ratio)

    # Print banner and configuration
    print("=" * 60)
    print("Slide Engine")
    print("=" * 60)
    print(f"Configuration: {args.config}")
    try:
        print(f"Document:      {config.document_path}")
        print(f"Output:        {config.output_path}")
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    print(f"Template:      {config.template_id}")
    print(f"Aspect ratio:  {config.aspect_ratio or 'from document'}")
    print("=" * 60)

    # Generate deck
    try:
        generator = DeckGenerator(config)
        result = generator.generate()
    except (FileNotFoundError, FileExistsError) as e:
        print(f"\nError: {e}")
        return 1
    except SlideEngineError as e:
        print(f"\nError rendering deck: {e}")
        return 1
    except Exception as e:
        logging.exception("Error generating deck")
        print(f"\nError generating deck: {e}")
        return 1

    print("\n" + "=" * 60)
    print(f"Done! {len(result.slides)} slides written to {result.output_path}")
    print("=" * 60)
    return 0


if __name__ == '__main__':
    sys.exit(main())
