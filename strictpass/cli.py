"""CLI for StrictPass: generate passwords and manage saved defaults (show/set/reset)."""

import argparse
import logging
import sys

from rich import print
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import DEFAULTS, config_path, load_config, save_config, reset_config
from .errors import InvalidOption, ValidationError
from .generator import PasswordGenerator
from .options import Options

BOOL_KEYS = {"numbers", "uppercase", "lowercase", "exclude_similar_characters", "strict"}
TRUE_WORDS = {"1", "true", "yes", "on"}
FALSE_WORDS = {"0", "false", "no", "off"}

def parse_value(key, raw):
    """Turn a `config set` string into the type the option expects."""
    if key not in DEFAULTS:
        raise InvalidOption(f"unknown option: {key}")
    word = raw.strip().lower()
    if key == "length":
        try:
            return int(raw)
        except ValueError:
            raise InvalidOption(f"length must be an integer, got {raw!r}")
    if key in BOOL_KEYS:
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        raise InvalidOption(f"{key} must be true or false, got {raw!r}")
    if key == "symbols":
        # anything that is not a boolean word is an explicit symbol list
        if word in TRUE_WORDS:
            return True
        if word in FALSE_WORDS:
            return False
        return raw
    return raw

def _overrides(args):
    out = {}
    for key in ("length", "numbers", "symbols", "exclude", "uppercase", "lowercase", "strict"):
        value = getattr(args, key)
        if value is not None:
            out[key] = value
    if args.exclude_similar is not None:
        out["exclude_similar_characters"] = args.exclude_similar
    return out

def cmd_generate(args):
    cfg = load_config()
    cfg.update(_overrides(args))
    options = Options.from_dict(cfg)
    passwords = PasswordGenerator().generate_multiple(args.copies, options)
    for i, pw in enumerate(passwords):
        if args.plain:
            sys.stdout.write(pw + "\n")
        else:
            print(f"[bold green]Password #{i+1}:[/bold green] {escape(pw)}")

def cmd_config_show(args):
    cfg = load_config()
    table = Table(show_header=True, header_style="bold cyan", title=config_path())
    table.add_column("Option")
    table.add_column("Value")
    for key, value in cfg.items():
        table.add_row(key, escape(repr(value)))
    print(table)

def cmd_config_set(args):
    cfg = load_config()
    cfg[args.key] = parse_value(args.key, args.value)
    save_config(cfg)
    print(f"[green]Saved[/green] {args.key} = {escape(repr(cfg[args.key]))}")

def cmd_config_reset(args):
    reset_config()
    print("[green]Restored default options.[/green]")

def build_parser():
    parser = argparse.ArgumentParser(prog="strictpass")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="cmd", required=True)

    gen = sub.add_parser("generate", help="Generate one or more passwords")
    gen.add_argument("--length", type=int, help="Password length")
    gen.add_argument("--numbers", action=argparse.BooleanOptionalAction, help="Include digits")
    gen.add_argument("--symbols", nargs="?", const=True, metavar="CHARS",
                     help="Include symbols, optionally an explicit symbol list "
                          "(use --symbols=-= when the list starts with -)")
    gen.add_argument("--no-symbols", dest="symbols", action="store_false", default=None, help="Disable symbols")
    gen.add_argument("--uppercase", action=argparse.BooleanOptionalAction, help="Include uppercase letters")
    gen.add_argument("--lowercase", action=argparse.BooleanOptionalAction, help="Include lowercase letters")
    gen.add_argument("--exclude", type=str, metavar="CHARS", help="Characters to leave out of the pool")
    gen.add_argument("--exclude-similar", action=argparse.BooleanOptionalAction,
                     help="Leave out look-alike characters (ilLI|`oO0)")
    gen.add_argument("--strict", action=argparse.BooleanOptionalAction,
                     help="Require one character of every enabled class")
    gen.add_argument("--copies", type=int, default=1, help="How many passwords to generate")
    gen.add_argument("--plain", action="store_true", help="Print bare passwords, one per line")
    gen.set_defaults(func=cmd_generate, symbols=None)

    c = sub.add_parser("config", help="Saved default options")
    csub = c.add_subparsers(dest="ccmd", required=True)

    c_show = csub.add_parser("show", help="Show saved defaults")
    c_show.set_defaults(func=cmd_config_show)

    c_set = csub.add_parser("set", help="Change one saved default")
    c_set.add_argument("key", choices=sorted(DEFAULTS), help="Option name")
    c_set.add_argument("value", help="New value")
    c_set.set_defaults(func=cmd_config_set)

    c_reset = csub.add_parser("reset", help="Forget saved defaults")
    c_reset.set_defaults(func=cmd_config_reset)

    return parser

def setup_logging():
    """Send strictpass debug records to stderr so --plain output stays clean."""
    logger = logging.getLogger("strictpass")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True)))
    logger.setLevel(logging.DEBUG)

def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verbose:
        setup_logging()
    try:
        args.func(args)
    except ValidationError as e:
        print(f"[red]{e.code}: {escape(e.message)}[/red]")
        raise SystemExit(2)

if __name__ == "__main__":
    main()
