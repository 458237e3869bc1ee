#!/usr/bin/env python3
"""XML Masking CLI - Hide the content of named elements in XML documents.

This is the main entry point for the XML masking application.
Supports single file, stdin and batch mode.

The content of every configured element is replaced with ***. Elements
that are never closed cause the rest of the document to be dropped and
replaced with [...TRUNCATED XML].
"""

import argparse
import sys
from pathlib import Path

from config import get_input_extensions, get_mask_elements, get_output_config, load_config
from core.element_masker import ElementMasker
from file_io.file_processor import process_file


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Mask the content of named elements in XML documents.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Mask <password> and <secret> in one file
  python main.py request.xml -e password -e secret -o masked.xml

  # Mask from stdin to stdout using element names from config.yaml
  cat request.xml | python main.py -

  # Batch process all XML files in current directory
  # Output will be saved to 'output/' folder
  python main.py
        """
    )
    parser.add_argument(
        "input_file",
        nargs="?",
        help="Path to input document, or '-' for stdin. If omitted, processes all supported files in current directory."
    )
    parser.add_argument(
        "-e", "--element",
        action="append",
        dest="elements",
        metavar="NAME",
        help="Element name to mask (repeatable). Defaults to masking.elements in config.yaml"
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file path (only for single file mode)"
    )
    parser.add_argument(
        "--config",
        help="Path to config file (default: config.yaml in project root)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show masked elements"
    )
    args = parser.parse_args(argv)

    config = load_config(args.config)
    element_names = args.elements or get_mask_elements(config)
    if not element_names:
        print("Error: No element names to mask. Use -e NAME or set masking.elements.", file=sys.stderr)
        return 1

    if args.input_file == "-":
        masker = ElementMasker(element_names)
        # Bytes in and out so line endings pass through untranslated
        content = sys.stdin.buffer.read().decode("utf-8")
        sys.stdout.flush()
        sys.stdout.buffer.write(masker.mask(content).encode("utf-8"))
        sys.stdout.buffer.flush()
        return 0

    output_cfg = get_output_config(config)

    if args.input_file:
        # Single file mode
        input_path = Path(args.input_file)
        if not input_path.exists():
            print(f"Error: File {input_path} not found.", file=sys.stderr)
            return 1

        output_path = Path(args.output) if args.output else None
        log_path = None
        if output_path:
            log_path = output_path.with_name(f"{input_path.stem}{output_cfg['log_suffix']}")

        result = process_file(
            input_path, output_path, log_path, element_names, args.verbose, config=config
        )
        return 0 if result is not None else 1

    # Batch mode
    print("Running in Batch Mode...", file=sys.stderr)
    root_dir = Path(".")
    output_dir = root_dir / output_cfg["directory"]
    output_dir.mkdir(exist_ok=True)

    extensions = get_input_extensions(config)
    files_to_process = sorted(
        f for f in root_dir.iterdir()
        if f.is_file() and f.suffix.lower() in extensions
    )

    if not files_to_process:
        print("No compatible files found to process.", file=sys.stderr)
        return 0

    print(f"Found {len(files_to_process)} files.", file=sys.stderr)

    failures = 0
    for input_path in files_to_process:
        output_path = output_dir / f"{input_path.stem}.masked{input_path.suffix}"
        log_path = output_dir / f"{input_path.stem}{output_cfg['log_suffix']}"

        result = process_file(
            input_path, output_path, log_path, element_names, args.verbose, config=config
        )
        if result is None:
            failures += 1

    print(f"\nBatch processing complete. Results in '{output_dir.absolute()}'", file=sys.stderr)
    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main())
