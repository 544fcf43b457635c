"""Lightweight logging helper."""
from __future__ import annotations

import sys
from datetime import datetime


def log(msg: str, stream=None):
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] {msg}", file=stream or sys.stdout)
