#!/usr/bin/env python3
"""
Filtered Player
---------------
Checks video links against the guardian's channel filter and prints the
embed URL for videos that may play.
"""

import sys

from player_client.cli import main

if __name__ == "__main__":
    sys.exit(main())
