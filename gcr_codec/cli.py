#!/usr/bin/env python3
"""
Command line tool for GCR messages.

    gcr decode message.txt            decoded message as JSON
    gcr decode --table message.txt    flights as a table
    gcr encode message.json           GCR text from JSON
    gcr validate message.txt          list validation errors
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from gcr_codec.codec import GcrCodec
from gcr_codec.models.message import GcrMessage
from gcr_codec.models.validation import GcrCodecError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class GcrTool:
    """Runs one CLI command against a GcrCodec."""

    def __init__(self, args):
        """
        Initialize the tool.

        Args:
            args: Parsed command line arguments
        """
        self.args = args
        self.codec = GcrCodec()

    def run(self) -> int:
        handler = getattr(self, f"cmd_{self.args.command}")
        try:
            return handler()
        except GcrCodecError as e:
            print(str(e), file=sys.stderr)
            return 1

    def cmd_decode(self) -> int:
        message = self.codec.decode_or_raise(self._read_input())
        if self.args.table:
            from gcr_codec.utils.flight_table import flights_dataframe
            df = flights_dataframe(message)
            self._write_output(df.to_string(index=False))
        else:
            self._write_output(message.to_json())
        return 0

    def cmd_encode(self) -> int:
        message = self._load_json_message(self._read_input())

        if not self.args.no_validate:
            self.codec.validate_or_raise(message)

        self._write_output(self.codec.encode(message))
        return 0

    def cmd_validate(self) -> int:
        text = self._read_input()
        if self.args.json:
            message = self._load_json_message(text)
        else:
            message = self.codec.decode_or_raise(text)

        result = self.codec.validate(message)
        lines = [str(result)]
        lines.extend(f"  - {error}" for error in result.errors)
        lines.extend(f"  ! {warning}" for warning in result.warnings)
        self._write_output('\n'.join(lines))
        return 0 if result.is_valid else 1

    @staticmethod
    def _load_json_message(text: str) -> GcrMessage:
        try:
            return GcrMessage.from_json(text)
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise GcrCodecError(f"Invalid message JSON: {e}") from e

    def _read_input(self) -> str:
        if self.args.input and self.args.input != '-':
            logger.debug(f"Reading {self.args.input}")
            return Path(self.args.input).read_text(encoding='utf-8')
        return sys.stdin.read()

    def _write_output(self, text: str) -> None:
        if self.args.output:
            Path(self.args.output).write_text(text + '\n', encoding='utf-8')
            logger.info(f"Results saved to {self.args.output}")
        else:
            print(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='GCR slot coordination message tool')
    parser.add_argument('-o', '--output', help='Output file (default: stdout)')
    parser.add_argument('-v', '--verbose', help='Verbose output', action='store_true')

    subparsers = parser.add_subparsers(dest='command', required=True)

    decode_parser = subparsers.add_parser('decode', help='Decode GCR text to JSON')
    decode_parser.add_argument('input', help='GCR text file (default: stdin)', nargs='?')
    decode_parser.add_argument('-t', '--table', help='Print flights as a table', action='store_true')

    encode_parser = subparsers.add_parser('encode', help='Encode message JSON to GCR text')
    encode_parser.add_argument('input', help='Message JSON file (default: stdin)', nargs='?')
    encode_parser.add_argument('--no-validate', help='Skip validation before encoding', action='store_true')

    validate_parser = subparsers.add_parser('validate', help='Validate a GCR message')
    validate_parser.add_argument('input', help='GCR text or JSON file (default: stdin)', nargs='?')
    validate_parser.add_argument('--json', help='Input is message JSON rather than GCR text', action='store_true')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING, format=LOG_FORMAT)

    return GcrTool(args).run()


if __name__ == '__main__':
    sys.exit(main())
