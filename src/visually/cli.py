"""visually CLI: verify, build and inspect .visual files."""

import argparse
import json
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path
from typing import Optional

from visually._internal.logging_utils import setup_logging

logger = logging.getLogger(__name__)


def main():
    """Main CLI entry point for visually commands."""
    try:
        visually_version = get_version("visually")
    except PackageNotFoundError:
        visually_version = "dev"

    parser = argparse.ArgumentParser(
        prog="visually",
        description="visually: read, verify and build .visual presentation files"
    )
    parser.add_argument("--version", action="version", version=f"visually {visually_version}")
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # verify command
    verify_parser = subparsers.add_parser(
        "verify",
        help="Verify a .visual file",
        parents=[parent_parser]
    )
    verify_parser.add_argument(
        "visual_path",
        type=Path,
        help="Path to .visual file"
    )
    verify_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory for validation_result.json"
    )

    # from-images command
    from_images_parser = subparsers.add_parser(
        "from-images",
        help="Build a .visual file from image URLs",
        parents=[parent_parser]
    )
    from_images_parser.add_argument(
        "urls",
        nargs="+",
        help="Image URLs, in playback order"
    )
    from_images_parser.add_argument(
        "--title",
        required=True,
        help="Presentation title"
    )
    from_images_parser.add_argument(
        "--out",
        type=Path,
        required=True,
        help="Path of the .visual file to write"
    )

    # youtube-embed command
    youtube_parser = subparsers.add_parser(
        "youtube-embed",
        help="Print the privacy-enhanced embed URL for a YouTube link"
    )
    youtube_parser.add_argument("url", help="YouTube URL")

    # schema command
    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the JSON Schema of the .visual format"
    )
    schema_parser.add_argument(
        "--out",
        type=Path,
        default=None,
        help="Write the schema to this path instead of stdout"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    setup_logging(args.verbose)

    def _write_validation_result(result, output_dir: Optional[Path], filename: str) -> None:
        result_dict = result.model_dump()
        if output_dir is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            report_out = output_dir / filename
            report_out.write_text(json.dumps(result_dict, indent=2, sort_keys=True) + "\n", encoding="utf-8")
        if not args.quiet:
            status = "OK" if result.ok else "FAILED"
            print(f"[{status}] Verification complete")
            if output_dir is not None:
                print(f"  Report: {report_out}")
            print(f"  Status: {status}")
            print(f"  Errors: {len(result.errors)}")
            print(f"  Warnings: {len(result.warnings)}")
            for issue in result.errors + result.warnings:
                print(f"  - [{issue.code}] {issue.message}")
        if not result.ok:
            sys.exit(1)

    if args.command == "verify":
        from visually.api import validate

        logger.debug("Verifying %s", args.visual_path)
        result = validate(path=args.visual_path)
        _write_validation_result(result, args.output_dir, "validation_result.json")

    elif args.command == "from-images":
        from visually.api import save_visual_file
        from visually.converter import from_image_urls

        presentation = from_image_urls(args.title, args.urls)
        try:
            out_path = save_visual_file(presentation, args.out)
        except OSError as e:
            print(f"Error: Could not write {args.out}: {e}", file=sys.stderr)
            sys.exit(1)
        logger.debug("Wrote %d media items", len(presentation.media_queue))
        if not args.quiet:
            print(f"[OK] Wrote {out_path}")

    elif args.command == "youtube-embed":
        from visually.utils import get_youtube_embed_url

        embed_url = get_youtube_embed_url(args.url)
        if embed_url is None:
            print(f"Error: Not a YouTube URL: {args.url}", file=sys.stderr)
            sys.exit(1)
        print(embed_url)

    elif args.command == "schema":
        from visually.api import json_schema

        schema_text = json.dumps(json_schema(), indent=2, ensure_ascii=False)
        if args.out is not None:
            args.out.write_text(schema_text + "\n", encoding="utf-8")
            print(f"Generated: {args.out}")
        else:
            print(schema_text)


if __name__ == "__main__":
    main()
