import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console

from tagstyle.config import OUTPUT_FORMATS, load_config
from tagstyle.placeholders import normalize_key, parse_placeholder_map
from tagstyle.pipeline import Preview, preview
from tagstyle.render import render_text
from tagstyle.templates import get_template

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagstyle", description="Preview and validate format-tagged text"
    )
    parser.add_argument("text", nargs="?", default=None, help="Tagged text (defaults to stdin)")
    parser.add_argument(
        "--placeholders",
        default=None,
        metavar="FILE",
        help="File with key=value lines, one placeholder per line",
    )
    parser.add_argument(
        "--format", choices=OUTPUT_FORMATS, default=None, help="Output format"
    )
    parser.add_argument(
        "--validate", action="store_true", default=None, help="Report tag warnings on stderr"
    )
    parser.add_argument(
        "--no-validate", dest="validate", action="store_false", default=None, help="Skip validation"
    )
    parser.add_argument(
        "--strict", action="store_true", default=None, help="Exit with status 1 if there are warnings"
    )
    parser.add_argument("--template", default=None, metavar="NAME", help="Use a preset template")
    parser.add_argument(
        "--interactive", action="store_true", default=False, help="Open the live preview"
    )
    parser.add_argument(
        "--logging", action="store_true", default=None, help="Enable logging"
    )
    return parser


def emit(result: Preview, output_format: str, console: Console) -> None:
    if output_format == "json":
        data = {
            "segments": [segment.as_dict() for segment in result.segments],
            "warnings": [warning.as_dict() for warning in result.warnings],
        }
        console.print_json(json.dumps(data))
    elif output_format == "text":
        console.print(render_text(result.segments), soft_wrap=True)
    else:
        console.out(result.html, highlight=False)


def main(argv=None) -> int:
    """Main entry point for the tagstyle command."""
    args = build_parser().parse_args(argv)

    # Load configuration from ~/.config/tagstyle/init.yaml
    config, config_error = load_config()
    err_console = Console(stderr=True)
    if config_error:
        err_console.print(f"Config error: {config_error}", markup=False, highlight=False)

    # Command-line arguments override config
    if args.format is not None:
        config.output_format = args.format
    if args.validate is not None:
        config.validate = args.validate
    if args.strict is not None:
        config.strict = args.strict
    if args.logging:
        logging.basicConfig(
            level=logging.INFO,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            filename=config.log_file or "tagstyle.log",
            filemode="a",  # append mode
        )
        logging.getLogger("tagstyle").setLevel(logging.DEBUG)

    placeholders = {normalize_key(k): v for k, v in config.placeholders.items()}
    if args.placeholders:
        try:
            block = Path(args.placeholders).read_text()
        except OSError as e:
            err_console.print(f"Cannot read placeholders: {e}", markup=False, highlight=False)
            return 2
        placeholders.update(parse_placeholder_map(block))

    if args.template:
        try:
            text = get_template(args.template).value
        except KeyError as e:
            err_console.print(str(e.args[0]), markup=False, highlight=False)
            return 2
    elif args.text is not None:
        text = args.text
    elif args.interactive:
        text = None
    else:
        text = sys.stdin.read()

    if args.interactive:
        from tagstyle.tui import PreviewApp

        config.placeholders = placeholders
        app = PreviewApp(config) if text is None else PreviewApp(config, text)
        app.run()
        return 0

    logger.info("Rendering %d chars as %s", len(text), config.output_format)
    result = preview(text, placeholders)
    emit(result, config.output_format, Console(highlight=False))

    if result.error:
        err_console.print(result.error, markup=False, highlight=False)
        return 1

    if config.validate:
        for warning in result.warnings:
            err_console.print(f"warning: {warning.message}", highlight=False, markup=False)

    if config.strict and result.warnings:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
