"""
KSUID - K-Sortable Unique Identifier.

Used as the tracking ID of engine errors and crash records.
Format: 4 bytes timestamp + 16 bytes random = 27 char base62 string.
"""

import os
import struct
import time

# KSUID epoch: 2014-05-13
KSUID_EPOCH = 1400000000
KSUID_LENGTH = 27
BASE62 = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz"


def _base62(raw):
    n = int.from_bytes(raw, byteorder="big")
    chars = []
    while n > 0:
        n, remainder = divmod(n, 62)
        chars.append(BASE62[remainder])
    return "".join(reversed(chars)).rjust(KSUID_LENGTH, "0")


def generate_ksuid(now=None):
    """Generate a 27-character sortable unique ID.

    ``now`` is a Unix time in seconds; the current time is used when omitted.
    """
    seconds = int(time.time() if now is None else now) - KSUID_EPOCH
    return _base62(struct.pack(">I", seconds) + os.urandom(16))


def ksuid_seconds(ksuid):
    """Unix time (seconds) encoded in a KSUID."""
    n = 0
    for char in ksuid:
        n = n * 62 + BASE62.index(char)
    return (n >> 128) + KSUID_EPOCH
