#!/usr/bin/env python3
"""
Deck Jockey - Now Playing on a Stream Deck
Mirrors the current track, album art and progress onto a Stream Deck
and turns its keys into media controls.

Version: 1.0
License: MIT
"""

import sys
import argparse

from config.settings import (
    POLL_INTERVAL,
    DECK_BRIGHTNESS,
    SPOTIPY_CLIENT_ID,
    SPOTIPY_CLIENT_SECRET
)
from core.errors import NoDeviceError
from core.jockey import build_jockey


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description='Deck Jockey - Now Playing on a Stream Deck',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Basic mode (playerctl only):
  python3 deck_jockey.py

  # With Spotify progress and Discord presence:
  python3 deck_jockey.py --spotify
  # then open http://127.0.0.1:8888/login in a browser

  # Spotify without Discord presence, slower polling:
  python3 deck_jockey.py --spotify --no-presence --interval 2
        """
    )
    parser.add_argument(
        '--spotify', '-s',
        action='store_true',
        help='Use Spotify for playback progress (starts the login server)'
    )
    parser.add_argument(
        '--no-presence',
        action='store_true',
        help='Do not broadcast the current track to Discord'
    )
    parser.add_argument(
        '--interval', '-i',
        type=float,
        default=POLL_INTERVAL,
        help=f'Seconds between updates (default: {POLL_INTERVAL:g})'
    )
    parser.add_argument(
        '--brightness', '-b',
        type=int,
        default=DECK_BRIGHTNESS,
        help=f'Stream Deck brightness 0-100 (default: {DECK_BRIGHTNESS})'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Verbose output (skipped ticks, token refreshes, unbound keys)'
    )
    return parser.parse_args(argv)


def check_spotify_credentials():
    """Exit with instructions if the Spotify credentials are placeholders"""
    if SPOTIPY_CLIENT_ID == 'YOUR_CLIENT_ID_HERE' or SPOTIPY_CLIENT_SECRET == 'YOUR_CLIENT_SECRET_HERE':
        print("\n❌ ERROR: Spotify API credentials not configured!")
        print("\nPlease edit config.py and add your credentials:")
        print("1. Go to: https://developer.spotify.com/dashboard")
        print("2. Create an app and get your Client ID and Secret")
        print("3. Add http://127.0.0.1:8888/callback as a Redirect URI")
        print("4. Edit config.py and replace YOUR_CLIENT_ID_HERE")
        print("   and YOUR_CLIENT_SECRET_HERE with your actual values\n")
        sys.exit(1)


def main(argv=None):
    args = parse_args(argv)

    if args.interval <= 0:
        print("❌ --interval must be greater than 0")
        sys.exit(2)

    if args.spotify:
        check_spotify_credentials()

    print("\n" + "="*60)
    print("  DECK JOCKEY - Initialization")
    print("="*60)

    try:
        jockey = build_jockey(
            streaming=args.spotify,
            presence=not args.no_presence,
            interval=args.interval,
            brightness=args.brightness,
            verbose=args.verbose
        )
    except NoDeviceError as e:
        print(f"❌ Failed to initialize Stream Deck: {e}")
        print("\nTroubleshooting:")
        print("- Check the USB cable and that the deck shows its logo")
        print("- Close the Elgato software (it holds the device open)")
        print("- On Linux, add a udev rule so your user can access the device")
        print("- Verify hidapi is installed: ldconfig -p | grep hidapi")
        sys.exit(1)

    jockey.run()


if __name__ == "__main__":
    main()
