#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
int_loader.py
-------------

Read integer fixture files: one integer per line, blank lines ignored.

Fixtures produced by a Python script redirected on Windows are UTF‑16 with
a BOM, so unless an encoding is given the BOM decides (UTF‑16 or UTF‑8‑sig)
and plain UTF‑8 is assumed otherwise.
"""

from __future__ import annotations

import codecs
import logging
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

_BOMS = (
    (codecs.BOM_UTF8, "utf-8-sig"),
    (codecs.BOM_UTF16_LE, "utf-16"),
    (codecs.BOM_UTF16_BE, "utf-16"),
)


def detect_encoding(raw: bytes) -> str:
    """Return the codec named by the byte order mark of *raw*, or ``utf-8``."""
    for bom, encoding in _BOMS:
        if raw.startswith(bom):
            return encoding
    return "utf-8"


def read_ints(path: Union[str, Path], encoding: Optional[str] = None) -> List[int]:
    """
    Return the integers stored in *path*, in file order.

    Raises ``ValueError`` naming the file and line for anything that is not
    an integer.
    """
    path = Path(path)
    raw = path.read_bytes()
    if encoding is None:
        encoding = detect_encoding(raw)
    logger.debug("Reading %s as %s", path, encoding)

    values: List[int] = []
    for lineno, line in enumerate(raw.decode(encoding).splitlines(), start=1):
        line = line.strip()
        if not line:
            continue
        try:
            values.append(int(line))
        except ValueError:
            raise ValueError(f"{path}:{lineno}: not an integer: {line!r}") from None
    return values
