"""
M3U to JSON converter.
Parses an M3U playlist and writes the classified records as a JSON array.

Usage:
    python -m keditv.scripts.m3u_to_json iptv.m3u [iptv.json]
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from keditv.services.m3u_parser import is_valid_playlist, parse_playlist, read_playlist_file

logger = logging.getLogger(__name__)


def default_output_path(input_file: str) -> str:
    """iptv.m3u -> iptv.json; other names get '.json' appended."""
    if input_file.endswith(".m3u"):
        return input_file[:-len(".m3u")] + ".json"
    return input_file + ".json"


def convert(input_file: str, output_file: str) -> int:
    """Convert one playlist file. Returns the number of records written."""
    content = read_playlist_file(input_file)

    if not is_valid_playlist(content):
        raise ValueError(f"'{input_file}' is not a valid M3U playlist.")

    logger.info("Parsing entries...")
    items = parse_playlist(content)

    logger.info("Writing JSON file...")
    records = [item.model_dump() for item in items]
    Path(output_file).write_text(
        json.dumps(records, indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
    return len(records)


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    parser = argparse.ArgumentParser(description="Convert an M3U playlist to JSON")
    parser.add_argument(
        "input_file",
        nargs="?",
        default="iptv.m3u",
        help="M3U playlist to read (default: iptv.m3u)"
    )
    parser.add_argument(
        "output_file",
        nargs="?",
        help="JSON file to write (default: input name with .json)"
    )
    args = parser.parse_args(argv)

    output_file = args.output_file or default_output_path(args.input_file)
    logger.info(f"Input file: {args.input_file}")
    logger.info(f"Output file: {output_file}")

    try:
        count = convert(args.input_file, output_file)
    except (OSError, ValueError) as e:
        logger.error(f"Error: {e}")
        return 1

    logger.info(f"Successfully converted to {output_file}")
    logger.info(f"Total entries: {count}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
