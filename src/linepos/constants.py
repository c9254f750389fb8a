"""
linepos.constants
=================

Line delimiters and serialization schema versions.
"""

from __future__ import annotations

LF = "\n"
CRLF = "\r\n"

INDEX_SCHEMA = 0  # version of the serialized LineIndex format
