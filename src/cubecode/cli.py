from __future__ import annotations
import argparse, json, logging, sys
from .binary.reader import decode_layout
from .models.config import DecodeOptions, FormatRevision
from .text import sanitize

log = logging.getLogger("cubecode")

def cmd_dump(args):
    opts = DecodeOptions(revision=args.revision, sanitize_strings=args.sanitize)
    try:
        data = bytes.fromhex(args.input) if args.hex else args.input
        pkt = decode_layout(data, args.layout, offset=args.offset, options=opts)
    except (ValueError, OSError) as e:  # CursorError, LayoutError, bad hex, unreadable file
        print(f"error: {e}", file=sys.stderr)
        return 1
    log.debug("decoded %d fields, %d bytes left", len(pkt.fields), pkt.remaining)
    print(json.dumps(pkt.model_dump(mode="json"), indent=2))
    return 0

def cmd_sanitize(args):
    opts = DecodeOptions(revision=args.revision)
    print(sanitize(args.text, strip_nulls=opts.strip_nulls))
    return 0

def build_parser():
    p = argparse.ArgumentParser(prog="cubecode", description="Cube 2 packet decoding utilities")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)
    revisions = [r.value for r in FormatRevision]

    sp = sub.add_parser("dump", help="decode fields of a packet as JSON")
    sp.add_argument("input", help="path to a raw packet, or hex digits with --hex")
    sp.add_argument("layout", help="field kinds to read: b=byte, i=int, s=string (e.g. 'iis')")
    sp.add_argument("--hex", action="store_true", help="treat input as hex instead of a path")
    sp.add_argument("--offset", type=int, default=0, help="start decoding at this byte offset")
    sp.add_argument("--revision", default=FormatRevision.CURRENT.value, choices=revisions)
    sp.add_argument("--sanitize", action="store_true", help="strip color codes from strings")
    sp.set_defaults(func=cmd_dump)

    sp = sub.add_parser("sanitize", help="strip color codes from a string")
    sp.add_argument("text")
    sp.add_argument("--revision", default=FormatRevision.CURRENT.value, choices=revisions)
    sp.set_defaults(func=cmd_sanitize)

    return p

def main(argv=None):
    ns = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )
    return ns.func(ns)


if __name__ == "__main__":
    raise SystemExit(main())
