"""CLI for richnote - a rich-text note engine."""

import argparse
import json
import platform
import sys
from pathlib import Path
from typing import Any

from . import __version__
from .adapters.yaml_codec import ScriptError, dump_snapshot, load_script
from .config import ConfigError
from .log import setup_logging
from .replay import ReplayError, replay
from .runtime import build_runtime


def cmd_id(args: argparse.Namespace, rt: Any) -> int:
    """Print a new note ID."""
    print(rt.idgen.new_id())
    return 0


def cmd_replay(args: argparse.Namespace, rt: Any) -> int:
    """Replay a YAML intent script and print the final state."""
    script = Path(args.script)
    if not script.exists():
        print(f"Script not found: {script}", file=sys.stderr)
        return 1

    try:
        intents = load_script(script.read_text(encoding="utf-8"))
        count = replay(rt.notebook, intents)
    except (ScriptError, ReplayError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    snapshot = rt.notebook.snapshot()
    if args.all:
        snapshot["all_notes"] = [
            {"id": note.id, "text": note.value.text, "spans": len(note.value.spans)}
            for note in rt.notebook.notes
        ]

    if not args.quiet:
        print(dump_snapshot(snapshot, "json" if args.json else "yaml").rstrip("\n"))
        print(f"{count} intents applied", file=sys.stderr)
    return 0


def cmd_serve(args: argparse.Namespace, rt: Any) -> int:
    """Start local JSON API server."""
    import uvicorn

    from .api.app import create_app, generate_token

    if args.token == "auto":
        token = generate_token()
    elif args.token == "none":
        token = None
    else:
        token = args.token

    host = args.host or rt.config.api.host
    port = args.port or rt.config.api.port

    app = create_app(rt, token=token, enable_cors=args.cors)

    print(f"Starting server on http://{host}:{port}")
    if token:
        print(f"Authorization required: Bearer {token}")

    uvicorn.run(app, host=host, port=port, log_level=log_level(args, rt).lower())
    return 0


def log_level(args: argparse.Namespace, rt: Any) -> str:
    """--log-level if given, else the configured level."""
    return args.log_level or rt.config.log.level


def version_string() -> str:
    return (
        f"richnote {__version__} "
        f"(python {platform.python_version()}, platform {sys.platform})"
    )


def main() -> None:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        prog="richnote", description="Richnote CLI"
    )
    parser.add_argument(
        "--version", action="version", version=version_string()
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: cwd/richnote.toml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (overrides config)",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Minimize output"
    )
    parser.add_argument(
        "--json", action="store_true", help="Machine-readable output"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    # id command
    subparsers.add_parser("id", help="Print a new note ID")

    # replay command
    parser_replay = subparsers.add_parser(
        "replay", help="Replay a YAML script of editor intents"
    )
    parser_replay.add_argument("script", help="Path to YAML intent script")
    parser_replay.add_argument(
        "--all", action="store_true", help="Also list every note's text"
    )

    # serve command
    parser_serve = subparsers.add_parser("serve", help="Start local JSON API server")
    parser_serve.add_argument(
        "--host", default=None,
        help="Host to bind to (default: from config, 127.0.0.1)"
    )
    parser_serve.add_argument(
        "--port", type=int, default=None,
        help="Port to bind to (default: from config, 8766)"
    )
    parser_serve.add_argument(
        "--token", default="auto",
        help="Bearer token (auto|<string>|none, default: auto)"
    )
    parser_serve.add_argument(
        "--cors", action="store_true",
        help="Enable CORS (default: false)"
    )

    args = parser.parse_args()

    try:
        rt = build_runtime(config_path=args.config)
    except ConfigError as e:
        print(f"Config error: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(log_level(args, rt))

    commands = {
        "id": cmd_id,
        "replay": cmd_replay,
        "serve": cmd_serve,
    }

    sys.exit(commands[args.cmd](args, rt))


if __name__ == "__main__":
    main()
