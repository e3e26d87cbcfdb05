"""CLI entry point for the grass sowing advisor."""

import argparse
import logging

from advisor.config.loader import load_config
from advisor.pipeline.advisory_pipeline import AdvisoryPipeline
from advisor.reporting.formatters import format_outcome_json, format_outcome_text


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="advisor",
        description="Grass seed sowing advice from a 14-day forecast",
    )
    parser.add_argument(
        "--config", default=None, help="Config YAML path (defaults if omitted)"
    )

    sub = parser.add_subparsers(dest="command")

    # check
    check_p = sub.add_parser("check", help="Get sowing advice for a postcode")
    check_p.add_argument(
        "postcode", nargs="?", default=None,
        help="UK postcode (config default_postcode if omitted)",
    )
    check_p.add_argument("--json", action="store_true", help="Print JSON")

    # serve
    serve_p = sub.add_parser("serve", help="Run the web app")
    serve_p.add_argument("--host", default=None, help="Bind host")
    serve_p.add_argument("--port", type=int, default=None, help="Bind port")

    # config show
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)

    if args.command == "check":
        return _cmd_check(config, args)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_check(config, args) -> int:
    postcode = args.postcode or config.default_postcode
    outcome = AdvisoryPipeline(config).run(postcode)
    if args.json:
        print(format_outcome_json(outcome))
    else:
        print(format_outcome_text(outcome))
    return 0 if outcome.ok else 1


def _cmd_serve(config, args) -> int:
    import uvicorn

    from advisor.dashboard import create_app

    host = args.host or config.server.host
    port = args.port or config.server.port
    uvicorn.run(create_app(config), host=host, port=port)
    return 0


def _cmd_config(config, args) -> int:
    if args.config_command == "show":
        print(config.model_dump_json(indent=2))
        return 0
    else:
        print("Use: config show")
        return 1
