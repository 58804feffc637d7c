"""humanizenumber CLI — format a number from the command line."""
from __future__ import annotations

import argparse
import logging
import sys

import humanizenumber.config as cfg
from humanizenumber.humanizer import Humanizer
from humanizenumber.utils.numeric import HumanizeError, Number

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    fmt = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=fmt,
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def parse_number(text: str) -> Number:
    """Parse '42' as int and '4.2' or '1e6' as float."""
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {text!r}") from None


def parse_override(text: str) -> tuple[Number, str]:
    """Parse a times override of the form N=TEXT."""
    key, sep, value = text.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError(f"override must look like N=TEXT, got {text!r}")
    return parse_number(key), value


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="humanizenumber-cli",
        description="humanizenumber — human-friendly numbers (CLI)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {cfg.APP_VERSION}")
    p.add_argument("-v", "--verbose", action="store_true")
    sub = p.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("intcomma", "group digits: 1234567 -> 1,234,567"),
        ("apnumber", "spell out 0-9: 3 -> three"),
        ("ordinal", "ordinal suffix: 21 -> 21st"),
    ):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("number", type=parse_number)

    sp = sub.add_parser("formatnumber", help="two decimals: 1234.5 -> 1,234.50")
    sp.add_argument("number", type=parse_number)
    sp.add_argument("--decimals", type=int, default=2)

    sp = sub.add_parser("intword", help="magnitude words: 1500000 -> 2 million")
    sp.add_argument("number", type=parse_number)
    sp.add_argument("--decimals", type=int, default=0)
    sp.add_argument("--compact", action="store_true", help="use K/M/B/T")

    for name, help_text in (
        ("intwordover", "magnitude words when the grouped form is too long"),
        ("compactinteger", "K/M/B/T when the grouped form is too long"),
    ):
        sp = sub.add_parser(name, help=help_text)
        sp.add_argument("number", type=parse_number)
        sp.add_argument("--decimals", type=int, default=0)
        sp.add_argument("--shorten-when-longer", type=int, default=None,
                        help="max characters before shortening (default from settings)")
        if name == "intwordover":
            sp.add_argument("--compact", action="store_true", help="use K/M/B/T")

    sp = sub.add_parser("boundednumber", help="cap a value: 150 100 -> 100+")
    sp.add_argument("value", type=parse_number)
    sp.add_argument("max", type=parse_number)

    sp = sub.add_parser("times", help="occurrences: 2 -> twice")
    sp.add_argument("count", type=parse_number)
    sp.add_argument("--override", type=parse_override, action="append", default=[],
                    metavar="N=TEXT", help="custom text for count N (repeatable)")

    sp = sub.add_parser("filesize", help="byte counts: 1536 -> 2 KB")
    sp.add_argument("number", type=parse_number)
    sp.add_argument("--decimals", type=int, default=0)
    sp.add_argument("--bytes-in-kb", type=int, default=None,
                    help="1024 or 1000 (default from settings)")
    return p


def run(args: argparse.Namespace, humanizer: Humanizer) -> str:
    cmd = args.command
    if cmd == "intcomma":
        return humanizer.intcomma(args.number)
    if cmd == "formatnumber":
        return humanizer.formatnumber(args.number, args.decimals)
    if cmd == "intword":
        return humanizer.intword(args.number, args.decimals, args.compact)
    if cmd == "intwordover":
        return humanizer.intwordover(args.number, args.decimals, args.shorten_when_longer, args.compact)
    if cmd == "compactinteger":
        return humanizer.compactinteger(args.number, args.decimals, args.shorten_when_longer)
    if cmd == "apnumber":
        return humanizer.apnumber(args.number)
    if cmd == "ordinal":
        return humanizer.ordinal(args.number)
    if cmd == "boundednumber":
        return humanizer.boundednumber(args.value, args.max)
    if cmd == "times":
        return humanizer.times(args.count, dict(args.override))
    if cmd == "filesize":
        return humanizer.filesize(args.number, args.decimals, args.bytes_in_kb)
    raise ValueError(f"Unknown command: {cmd}")


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    _setup_logging(args.verbose)
    cfg.load_settings()
    humanizer = Humanizer.from_config()
    logger.debug("Running %s with %s", args.command, humanizer)

    try:
        print(run(args, humanizer))
    except HumanizeError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
