#!/usr/bin/env python3
"""Command-line interface for pngme.

Hide text messages in PNG files as extra chunks, read them back, and remove
them again. Four subcommands map onto the functions in pngme.commands:

    pngme encode <file> <chunk_type> <message> [output]
    pngme decode <file> <chunk_type>
    pngme remove <file> <chunk_type>
    pngme print <file>
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import List, Optional

from pngme.commands import decode_file, encode_file, print_file, remove_file
from pngme.errors import PngError
from pngme.types import __version__


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the pngme CLI."""
    parser = argparse.ArgumentParser(
        prog="pngme",
        description="Hide messages in PNG files using custom chunks.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog='''
Examples:
  # Hide a message in a private ancillary chunk
  pngme encode image.png ruSt "meet at dawn"

  # Write the result to a new file instead of overwriting
  pngme encode image.png ruSt "meet at dawn" secret.png

  # Read it back
  pngme decode secret.png ruSt

  # Remove the first ruSt chunk
  pngme remove secret.png ruSt

  # Print every chunk's data as text
  pngme print secret.png
''')

    parser.add_argument('-v', '--version', action='version', version=f'%(prog)s {__version__}')

    subparsers = parser.add_subparsers(dest='command', required=True, help='Command to run')

    # Encode subcommand
    encode_parser = subparsers.add_parser('encode', help='Append a message chunk to a PNG')
    encode_parser.add_argument('file_path', help='PNG file to read')
    encode_parser.add_argument('chunk_type', help='4-letter chunk type, e.g. ruSt')
    encode_parser.add_argument('message', help='Message to hide')
    encode_parser.add_argument('output_path', nargs='?', default=None,
                               help='Output PNG file (default: overwrite file_path)')
    encode_parser.add_argument('--verbose', action='store_true', help='Verbose output')

    # Decode subcommand
    decode_parser = subparsers.add_parser('decode', help='Print the message in a chunk')
    decode_parser.add_argument('file_path', help='PNG file to read')
    decode_parser.add_argument('chunk_type', help='4-letter chunk type to look for')
    decode_parser.add_argument('--verbose', action='store_true', help='Verbose output')

    # Remove subcommand
    remove_parser = subparsers.add_parser('remove', help='Remove the first chunk of a type')
    remove_parser.add_argument('file_path', help='PNG file to modify in place')
    remove_parser.add_argument('chunk_type', help='4-letter chunk type to remove')
    remove_parser.add_argument('--verbose', action='store_true', help='Verbose output')

    # Print subcommand
    print_parser = subparsers.add_parser('print', help="Print every chunk's data as text")
    print_parser.add_argument('file_path', help='PNG file to read')
    print_parser.add_argument('--verbose', action='store_true', help='Verbose output')

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)

    if not os.path.exists(args.file_path):
        print(f"Error: Input file '{args.file_path}' not found.", file=sys.stderr)
        return 1

    try:
        if args.command == 'encode':
            encode_file(args.file_path, args.chunk_type, args.message,
                        args.output_path, args.verbose)
        elif args.command == 'decode':
            decode_file(args.file_path, args.chunk_type, args.verbose)
        elif args.command == 'remove':
            remove_file(args.file_path, args.chunk_type, args.verbose)
        elif args.command == 'print':
            print_file(args.file_path, args.verbose)
        return 0

    except (PngError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == '__main__':
    sys.exit(main())
