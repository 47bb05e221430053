import argparse
import json
import logging
import sys
from id36 import BYTE_LENGTH, UPPERCASE
from id36.decode import decode
from id36.encode import encode
from id36.errors import Id36Error

logger = logging.getLogger("id36")


def _hex_bytes(value):
    try:
        data = bytes.fromhex(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a hex string: {value!r}")
    if len(data) != BYTE_LENGTH:
        raise argparse.ArgumentTypeError(
            f"expected {BYTE_LENGTH * 2} hex digits, got {len(value)}"
        )
    return data


parser = argparse.ArgumentParser(
    prog="id36_codec",
    description="128-bit value <-> 25-digit Base36 codec",
)

group = parser.add_mutually_exclusive_group(required=True)
group.add_argument(
    "--encode", metavar="<hex>", type=_hex_bytes, help="16 bytes as 32 hex digits"
)
group.add_argument(
    "--decode",
    metavar="<text>",
    type=str,
    help="25-digit Base36 string, either case",
)
parser.add_argument(
    "--upper",
    action="store_true",
    default=UPPERCASE,
    help="encode with uppercase letters",
)
parser.add_argument(
    "-v", "--verbose", action="store_true", help="log rejection reasons"
)


def main(argv=None):
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        if args.encode is not None:
            print(encode(args.encode, uppercase=args.upper))
        if args.decode is not None:
            data = decode(args.decode)
            print(json.dumps({"hex": data.hex(), "int": int.from_bytes(data, "big")}))
    except Id36Error as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
