import logging
import sys

from reduse.core.config import WalkerConfiguration
from reduse.core.errors import DirectoryUnreadableError, InvalidWorkspaceError, OutOfMemoryError
from .arguments import build_parser
from .runner import run_walk, render

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # module loggers inherit from the package logger
    logging.getLogger("reduse").setLevel(logging.DEBUG if verbose else logging.WARNING)

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = WalkerConfiguration.from_env()
    except ValueError as exc:
        parser.error(str(exc))

    config_errors = config.validate()
    if config_errors:
        parser.error("; ".join(config_errors))

    try:
        report = run_walk(
            args.workspace,
            image_format=args.format,
            fix_imports=args.fix_imports,
            config=config,
        )
    except InvalidWorkspaceError as exc:
        parser.error(str(exc))
    except DirectoryUnreadableError as exc:
        print(f"Error: {exc.reason}", file=sys.stderr)
        print(f"Error opening {exc.path}", file=sys.stderr)
        return EXIT_FAILURE
    except OutOfMemoryError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    output = render(report, args.json)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
    else:
        print(output)

    return EXIT_SUCCESS

if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
