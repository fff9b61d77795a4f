"""Global configuration for shamirkit."""

import os
import string

# ---------- Prime catalog (Mersenne primes 2**p - 1, ascending) ----------
# Starts at M127 so every secret below 2**127 - 1 lives in the same field
# at split and at reconstruction time.
MERSENNE_EXPONENTS = (127, 521, 607, 1279, 2203, 2281, 3217, 4253, 4423, 9689, 9941, 11213)
PRIMES = tuple(2**p - 1 for p in MERSENNE_EXPONENTS)

# ---------- Alphabets ----------
DEFAULT_CHARSET = string.printable
HEX_CHARSET = "0123456789abcdef"

# ---------- Share wire format ----------
SHARE_SEPARATOR = "-"

# ---------- Service defaults (env vars override) ----------
DEFAULT_THRESHOLD = int(os.environ.get("SHAMIRKIT_THRESHOLD", "2"))      # K
DEFAULT_NUM_SHARES = int(os.environ.get("SHAMIRKIT_NUM_SHARES", "3"))    # N
MAX_SHARES = int(os.environ.get("SHAMIRKIT_MAX_SHARES", "255"))

LOG_LEVEL = os.environ.get("SHAMIRKIT_LOG_LEVEL", "WARNING")
