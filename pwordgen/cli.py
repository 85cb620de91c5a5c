"""CLI for pwordgen — generate passwords, estimate entropy, manage saved defaults (config show/set/reset)."""

import argparse
import logging
import sys

from rich import print
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .config import DEFAULTS, coerce_value, config_path, load_config, save_config
from .entropy import estimate_entropy_bits
from .errors import PasswordGenerationError, ValidationError
from .generator import generate_password
from .options import PasswordOptions, normalize_options
from .pool import describe_pool

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def _options_from_args(args) -> PasswordOptions:
    return normalize_options(
        length=args.length,
        lowercase=args.lowercase,
        uppercase=args.uppercase,
        digits=args.digits,
        symbols=args.symbols,
        custom=args.custom,
        exclude_similar=args.exclude_similar,
        exclude=args.exclude,
        require_each_selected_class=args.require_each,
    )


def cmd_generate(args) -> int:
    opts = _options_from_args(args)
    for i in range(args.copies):
        pw = generate_password(opts)
        if args.plain:
            sys.stdout.write(pw + "\n")
        else:
            # Text, not markup: passwords may contain [tags] or :emoji: codes
            print(Text.assemble((f"Password #{i+1}: ", "bold green"), pw))
    if args.show_entropy:
        bits = estimate_entropy_bits(opts)
        print(f"[cyan]Estimated entropy:[/cyan] {bits:.1f} bits")
    return 0


def cmd_entropy(args) -> int:
    opts = _options_from_args(args)
    summary = describe_pool(opts)
    bits = estimate_entropy_bits(opts)
    body = (
        f"Pool size: {len(summary.pool)} characters\n"
        f"Selected classes: {len(summary.class_pools)}\n"
        f"Length: {opts.length}\n"
    )
    print(Panel(body, title=f"Estimated entropy: {bits:.1f} bits"))
    return 0


# Config subcommands

def cmd_config_show(args) -> int:
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(key, escape(repr(value)))
    print(table)
    print(f"[dim]{escape(config_path())}[/dim]")
    return 0


def cmd_config_set(args) -> int:
    try:
        value = coerce_value(args.key, args.value)
    except ValueError as e:
        print(f"[red]{escape(str(e))}[/red]")
        return 2
    cfg = load_config()
    cfg[args.key] = value
    save_config(cfg)
    print(f"[green]Saved[/green] {args.key} = {escape(repr(value))}")
    return 0


def cmd_config_reset(args) -> int:
    save_config(DEFAULTS.copy())
    print(f"[green]Restored defaults in:[/green] {escape(config_path())}")
    return 0


def _positive_int(raw: str) -> int:
    try:
        n = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {raw!r}") from None
    if n < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return n


def _add_option_flags(p: argparse.ArgumentParser, cfg) -> None:
    p.add_argument("--length", "-l", type=int, default=cfg["length"], help="Password length")
    # paired on/off flags so a single run can override any saved default
    p.add_argument("--lower", dest="lowercase", action="store_true", help="Enable lowercase")
    p.add_argument("--no-lower", dest="lowercase", action="store_false", help="Disable lowercase")
    p.add_argument("--upper", dest="uppercase", action="store_true", help="Enable uppercase")
    p.add_argument("--no-upper", dest="uppercase", action="store_false", help="Disable uppercase")
    p.add_argument("--digits", dest="digits", action="store_true", help="Enable digits")
    p.add_argument("--no-digits", dest="digits", action="store_false", help="Disable digits")
    p.add_argument("--symbols", dest="symbols", action="store_true", help="Enable symbols")
    p.add_argument("--no-symbols", dest="symbols", action="store_false", help="Disable symbols")
    p.add_argument("--custom", type=str, default=cfg["custom"], help="Extra characters to include")
    p.add_argument("--exclude-similar", dest="exclude_similar", action="store_true",
                   help="Leave out look-alike characters (il1Lo0O)")
    p.add_argument("--no-exclude-similar", dest="exclude_similar", action="store_false",
                   help="Keep look-alike characters")
    p.add_argument("--exclude", type=str, default=cfg["exclude"], help="Characters to leave out")
    p.add_argument("--require-each", dest="require_each", action="store_true",
                   help="Use at least one character from every selected class")
    p.add_argument("--no-require-each", dest="require_each", action="store_false",
                   help="Do not force every selected class")
    p.set_defaults(
        lowercase=cfg["lowercase"],
        uppercase=cfg["uppercase"],
        digits=cfg["digits"],
        symbols=cfg["symbols"],
        exclude_similar=cfg["exclude_similar"],
        require_each=cfg["require_each_selected_class"],
    )


def build_parser() -> argparse.ArgumentParser:
    cfg = load_config()
    parser = argparse.ArgumentParser(prog="pwordgen")
    _add_log_level(parser)
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    _add_option_flags(gen, cfg)
    gen.add_argument("--copies", type=_positive_int, default=cfg["copies"],
                     help="How many passwords to generate")
    gen.add_argument("--show-entropy", action="store_true", help="Also print the entropy estimate")
    gen.add_argument("--plain", action="store_true", help="Print bare passwords, one per line")
    gen.set_defaults(func=cmd_generate)

    ent = sub.add_parser("entropy", help="Estimate entropy for the given options")
    _add_option_flags(ent, cfg)
    ent.set_defaults(func=cmd_entropy)

    c = sub.add_parser("config", help="Saved default settings")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show effective settings")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Save a default setting")
    c_set.add_argument("key", choices=sorted(DEFAULTS), help="Setting name")
    c_set.add_argument("value", type=str, help="New value")
    c_set.set_defaults(func=cmd_config_set)

    c_reset = csub.add_parser("reset", help="Restore built-in defaults")
    c_reset.set_defaults(func=cmd_config_reset)

    return parser


def _add_log_level(p: argparse.ArgumentParser) -> None:
    p.add_argument("--log-level", default="WARNING", choices=LOG_LEVELS, help="Logging verbosity")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
    )


def main(argv=None) -> int:
    # logging goes up first: reading the saved config may already warn
    pre = argparse.ArgumentParser(add_help=False, allow_abbrev=False)
    _add_log_level(pre)
    known, _ = pre.parse_known_args(argv)
    setup_logging(known.log_level)

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        return args.func(args)
    except ValidationError as e:
        print(f"[red]Invalid options: {escape(str(e))}[/red]")
        return 2
    except PasswordGenerationError as e:
        logger.error("password generation failed: %s", e)
        print(f"[red]Failed to generate password: {escape(str(e))}[/red]")
        return 1


if __name__ == "__main__":
    sys.exit(main())
