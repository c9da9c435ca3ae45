"""Train a tokenizer on a small text and show the encode/decode round trip."""

import argparse
import logging
import sys
from pathlib import Path

from ._models.basic import BasicTokenizer
from .config import TokenizerConfig
from .errors import BytePairError

DEMO_TEXT = "hello world the sky is blue"
DEFAULT_VOCAB_SIZE = 300


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bytepair",
        description="Train a byte-level BPE tokenizer and round-trip the training text.",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", help="training text (default: a short demo sentence)")
    source.add_argument("--file", type=Path, help="read training bytes from a file")
    parser.add_argument(
        "--vocab-size",
        type=int,
        default=DEFAULT_VOCAB_SIZE,
        help=f"target vocabulary size including the 256 byte tokens (default: {DEFAULT_VOCAB_SIZE})",
    )
    parser.add_argument(
        "--show-vocab", action="store_true", help="print the learned merged tokens"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="do not log each learned merge"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # Configure logging to show INFO level and above.
    logging.basicConfig(
        level=logging.WARNING if args.quiet else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.file is not None:
        data = args.file.read_bytes()
    else:
        data = (args.text if args.text is not None else DEMO_TEXT).encode("utf-8")

    print(f"Input Text:{data.decode('utf-8', errors='replace')}")
    try:
        tokenizer = BasicTokenizer(TokenizerConfig.from_env())
        tokenizer.train(data, args.vocab_size, verbose=not args.quiet)

        ids = tokenizer.encode(data)
        decoded = tokenizer.decode(ids)
    except BytePairError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    print("Encoded IDs:")
    print(" ".join(str(tok) for tok in ids))
    print(f"Decoded text: {decoded.decode('utf-8', errors='replace')}")

    if args.show_vocab:
        # base byte tokens are not interesting here
        for line in tokenizer.render_vocab()[256:]:
            print(line)

    return 0 if decoded == data else 1


if __name__ == "__main__":
    sys.exit(main())
