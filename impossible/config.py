"""
Configuration constants for the search engine and CLI.

Values are read from the environment once, at import time.
"""

import os

# --- ENUMERATION ---
# "backtracking" walks only the positions a predicate reads;
# "counting" visits every assignment over the present positions.
ENUMERATION = os.getenv("IMPOSSIBLE_ENUMERATION", "backtracking").strip().lower()

# --- LOGGING ---
LOG_LEVEL = os.getenv("IMPOSSIBLE_LOG_LEVEL", "WARNING").strip().upper()
LOG_FORMAT = "[%(name)s/%(funcName)s:%(lineno)d] %(message)s"

# Dump every candidate assignment at DEBUG level (very noisy).
TRACE_SCRATCH = os.getenv("IMPOSSIBLE_TRACE_SCRATCH", "0") == "1"

# --- COMBINATORS ---
# Two logical sequences share one physical sequence: even and odd positions.
STRIDE_PAIR = 2
