"""
what3words — Interactive CLI
============================
Thin wrapper around the what3words library.

Usage:
    what3words                        # interactive mode
    what3words filled.count.soap      # 3wa -> coordinates
    what3words 51.520847 -0.195521    # coordinates -> 3wa

Configuration is read from environment variables:
    W3W_API_KEY   Your what3words API key (required)
    W3W_API_URL   Alternative API host, e.g. a self-hosted instance
"""

import logging
import os
import sys
from functools import partial

from what3words import What3words
from what3words.client import DEFAULT_API_URL
from what3words.exceptions import ApiError, What3wordsError
from what3words.models import Address
from what3words.options import ConvertTo3wa, ConvertToCoordinates
from what3words.validation import (
    dotted_address,
    find_possible_addresses,
    is_possible_address,
)

_BANNER = """\
╔══════════════════════════════════════╗
║         what3words lookup            ║
║  Text → ///three.word.addresses      ║
╚══════════════════════════════════════╝
Type a message containing addresses, or 'q' to quit.
"""


def _print_address(address: Address) -> None:
    fields = {
        "words": address.words,
        "latitude": address.coordinates.lat,
        "longitude": address.coordinates.lng,
        "country": address.country,
        "nearest place": address.nearest_place,
        "language": address.language,
        "map": address.map,
    }
    for key, val in fields.items():
        print(f"{key:>20}: {val}")


def _run_interactive(client: What3words) -> None:
    print(_BANNER)

    while True:
        try:
            line = input("\nText:  ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nBye!")
            break

        if line.lower() in ("q", "quit", "exit"):
            print("Bye!")
            break
        if not line:
            continue

        found = find_possible_addresses(line)
        if not found:
            suggestion = dotted_address(line.lstrip("/"))
            if suggestion is not None:
                print(f"  ? Did you mean ///{suggestion}?")
            else:
                print("  ✗ No three word address found.")
            continue

        for words in found:
            try:
                address = client.convert_to_coordinates(
                    ConvertToCoordinates(words)
                )
            except ApiError as exc:
                print(f"  ✗ ///{words}: {exc.message}")
                continue
            except What3wordsError as exc:
                print(f"  ✗ Error: {exc}")
                continue
            print(
                f"  ✓ ///{address.words}  →  "
                f"{address.coordinates.lat}, {address.coordinates.lng}"
                f"  ({address.nearest_place})"
            )


def _single_shot(client: What3words, args: list[str]) -> int:
    if len(args) == 2:
        try:
            lat, lng = float(args[0]), float(args[1])
        except ValueError:
            print(f"Invalid coordinates: {args[0]} {args[1]}", file=sys.stderr)
            return 1
        request = partial(client.convert_to_3wa, ConvertTo3wa(lat, lng))
    else:
        words = args[0]
        if not is_possible_address(words):
            print(f"Not a three word address: {words}", file=sys.stderr)
            return 1
        request = partial(
            client.convert_to_coordinates, ConvertToCoordinates(words.lstrip("/"))
        )

    try:
        address = request()
    except What3wordsError as exc:
        print(f"Lookup failed: {exc}", file=sys.stderr)
        return 1
    _print_address(address)
    return 0


def main() -> None:
    """Entry point — supports both CLI args and interactive mode."""
    if os.environ.get("W3W_DEBUG"):
        logging.basicConfig(level=logging.DEBUG)

    api_key = os.environ.get("W3W_API_KEY")
    if not api_key:
        print("Error: W3W_API_KEY is not set.", file=sys.stderr)
        print(
            "Create a key at https://developer.what3words.com and export it "
            "as W3W_API_KEY.",
            file=sys.stderr,
        )
        sys.exit(2)

    client = What3words(api_key, host=os.environ.get("W3W_API_URL", DEFAULT_API_URL))
    try:
        if len(sys.argv) in (2, 3):
            sys.exit(_single_shot(client, sys.argv[1:]))
        else:
            _run_interactive(client)
    finally:
        client.close()


if __name__ == "__main__":
    main()
