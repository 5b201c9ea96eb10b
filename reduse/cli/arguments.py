import argparse

from reduse.core.config import DEFAULT_FORMAT, SUPPORTED_IMAGE_FORMATS

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="reduse",
        description="Collect workspace assets for image conversion and import fixing"
    )
    parser.add_argument(
        "workspace",
        nargs="?",
        default=".",
        help="Workspace directory (default: current directory)"
    )
    parser.add_argument(
        "-f", "--format",
        default=DEFAULT_FORMAT,
        choices=SUPPORTED_IMAGE_FORMATS,
        metavar="FORMAT",
        help=f"Output image format (default: {DEFAULT_FORMAT})"
    )
    parser.add_argument("-i", "--fix-imports", action="store_true", help="Fix imports")
    parser.add_argument("--json", action="store_true", help="Output JSON")
    parser.add_argument("--output", help="Write output to file")
    parser.add_argument("--verbose", action="store_true")

    return parser
