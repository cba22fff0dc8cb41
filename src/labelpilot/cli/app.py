"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys

from labelpilot import AuthenticationError, CatalogLoadError, ConfigError, ProviderError, SuggestionError


def main(argv: list[str] | None = None) -> int:
    import labelpilot.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    runners = {
        "apply": cli._run_apply,
        "wipe": cli._run_wipe,
        "migrate": cli._run_migrate,
        "check": cli._run_check,
        "list": cli._run_list,
        "generate": cli._run_generate,
        "update": cli._run_update,
    }

    try:
        return cli.asyncio.run(runners[args.command](args))
    except KeyboardInterrupt:
        print("\nAborted.", file=sys.stderr)
        return 2
    except (ConfigError, CatalogLoadError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except SuggestionError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 5
    except Exception as exc:  # pragma: no cover
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
