"""AI market research assistant."""

import argparse
import logging
from pathlib import Path
from typing import Optional

from marketresearch.config import Settings
from marketresearch.core.models import (
    ENTITY_TYPES,
    EXPORT_FORMATS,
    MODES,
    ExportRequest,
    ResearchRequest,
)
from marketresearch.core.research import run_research
from marketresearch.errors import ConfigError, MarketResearchError, ValidationError
from marketresearch.exporters import PlaywrightRenderer, export_document
from marketresearch.formatters import to_html, to_markdown
from marketresearch.llm import OpenRouterClient
from marketresearch.progress import ProgressHandler

logger = logging.getLogger(__name__)

VIEWS = ("raw", "basic", "html", "markdown")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="marketresearch",
        description="Research companies and sectors with an LLM",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="enable debug logging",
    )
    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="suppress status output",
    )
    parser.add_argument(
        "--env-file",
        default=None,
        help=".env file to read settings from (default: ./.env)",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    research = commands.add_parser("research", help="run a research query")
    research.add_argument("query", help="company or sector name")
    research.add_argument("--mode", required=True, choices=MODES)
    research.add_argument(
        "--entity-type",
        choices=ENTITY_TYPES,
        default=None,
        help="entity type for aiImpact mode (default: company)",
    )
    research.add_argument(
        "--view",
        choices=VIEWS,
        default="raw",
        help="output view (default: raw)",
    )
    research.add_argument(
        "--toc",
        action="store_true",
        help="add a table of contents to the html and markdown views",
    )
    research.add_argument("-o", "--output", help="write to file instead of stdout")

    export = commands.add_parser("export", help="export a text file as txt or pdf")
    export.add_argument("source", help="file with the content to export")
    export.add_argument("--format", choices=EXPORT_FORMATS, default="txt")
    export.add_argument("--name", help="download name (default: source file name)")
    export.add_argument("--html", help="pre-rendered HTML file for the PDF")
    export.add_argument(
        "--output-dir",
        default=".",
        help="directory to write the exported file to (default: .)",
    )

    serve = commands.add_parser("serve", help="run the web API")
    serve.add_argument("--host", default=None)
    serve.add_argument("--port", type=int, default=None)

    return parser


def _research(
    args: argparse.Namespace, settings: Settings, out: ProgressHandler
) -> int:
    client = OpenRouterClient(settings)
    try:
        out.start(f"Researching {args.query}...")
        result = run_research(
            ResearchRequest(
                query=args.query, mode=args.mode, entity_type=args.entity_type
            ),
            client,
        )
    finally:
        out.stop()
        client.close()

    views = {
        "raw": lambda: result.analysis,
        "basic": lambda: result.basic_formatted,
        "html": lambda: (
            result.formatted_analysis if args.toc else to_html(result.analysis)
        ),
        "markdown": lambda: to_markdown(
            result.analysis, add_table_of_contents=args.toc
        ),
    }
    text = views[args.view]()

    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        out.log_info(f"Wrote {args.view} output to {args.output}")
    else:
        print(text)
    return 0


def _export(
    args: argparse.Namespace, settings: Settings, out: ProgressHandler
) -> int:
    source = Path(args.source)
    if not source.is_file():
        raise ValidationError(f"Source not found: {args.source}")

    request = ExportRequest(
        filename=args.name or source.name,
        content=source.read_text(encoding="utf-8"),
        format=args.format,
        html_content=Path(args.html).read_text(encoding="utf-8") if args.html else None,
    )
    renderer = PlaywrightRenderer(
        executable_path=settings.chromium_executable,
        timeout_ms=settings.pdf_timeout_ms,
    )
    out.start("Exporting...")
    exported = export_document(request, renderer)
    out.stop()

    output_dir = Path(args.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)
    target = output_dir / exported.filename
    target.write_bytes(exported.body)
    out.log_info(f"Wrote {target}")
    return 0


def _serve(args: argparse.Namespace, settings: Settings) -> int:
    # web dependencies are only needed for this command
    import uvicorn  # pylint: disable=import-outside-toplevel

    from marketresearch.web import create_app  # pylint: disable=import-outside-toplevel

    uvicorn.run(
        create_app(settings),
        host=args.host or settings.host,
        port=args.port or settings.port,
    )
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """
    main entry point for the marketresearch CLI.

    Args:
        argv: command line arguments (defaults to sys.argv[1:])

    Returns:
        exit code (0 success, 1 provider or export failure, 2 invalid input or
        configuration)
    """
    args = _build_parser().parse_args(argv)

    # configures logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="[%(levelname)s] %(message)s",
    )

    with ProgressHandler(quiet=args.quiet) as out:
        try:
            settings = Settings.from_env(dotenv_path=args.env_file)
            if args.command == "research":
                return _research(args, settings, out)
            if args.command == "export":
                return _export(args, settings, out)
            return _serve(args, settings)
        except (ValidationError, ConfigError) as e:
            out.log_error(str(e))
            return 2
        except MarketResearchError as e:
            out.log_error(str(e))
            return 1
        except Exception as e:  # pylint: disable=broad-exception-caught
            logger.error("Fatal error: %s", e)
            return 2
