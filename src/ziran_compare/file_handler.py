#!/usr/bin/env python3
# -*- coding: utf-8 -*-
#
# Copyright (c) 2025 Emasoft
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# CHANGELOG:
# - Added encoding detection for raw input bytes (chardet / UniversalDetector)
# - Added line reading for files and stdin
#

"""Input reading with encoding detection for ziran-sort."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import BinaryIO

import chardet
from chardet.universaldetector import UniversalDetector

logger = logging.getLogger(__name__)

DEFAULT_FALLBACK_ENCODINGS = ["utf-8", "gb18030", "big5", "utf-16"]
SAMPLE_SIZE = 32 * 1024
STDIN_NAME = "-"


def _detect_with_universal(raw_data: bytes) -> tuple[str | None, float]:
    """Detect encoding with UniversalDetector, fed line by line."""
    detector = UniversalDetector()
    for line in raw_data.splitlines(keepends=True):
        detector.feed(line)
        if detector.done:
            break
    detector.close()
    result = detector.result
    return result.get("encoding"), result.get("confidence") or 0.0


def _detect_with_chardet(raw_data: bytes) -> tuple[str | None, float]:
    """Detect encoding with chardet.detect on a leading sample."""
    result = chardet.detect(raw_data[:SAMPLE_SIZE])
    return result.get("encoding"), result.get("confidence") or 0.0


def detect_encoding(
    raw_data: bytes,
    method: str = "auto",
    confidence_threshold: float = 0.7,
) -> tuple[str | None, float]:
    """
    Detect the encoding of raw bytes.

    Parameters:
    - raw_data: Bytes to analyze
    - method: Detection method to use
      - 'universal': Use UniversalDetector (reads line by line)
      - 'chardet': Use chardet.detect (reads sample)
      - 'auto': Try chardet first, fall back to universal if confidence low
    - confidence_threshold: Minimum confidence (only used with 'auto')

    Returns: (encoding, confidence) tuple, encoding is None when unknown
    """
    if method == "universal":
        return _detect_with_universal(raw_data)
    if method == "chardet":
        return _detect_with_chardet(raw_data)
    if method == "auto":
        encoding, confidence = _detect_with_chardet(raw_data)
        if encoding and confidence >= confidence_threshold:
            return encoding, confidence
        logger.debug(f"chardet confidence {confidence} below threshold {confidence_threshold}, trying UniversalDetector")
        return _detect_with_universal(raw_data)
    raise ValueError(f"Unknown detection method: {method}")


def decode_bytes(
    raw_data: bytes,
    encoding: str = "auto",
    detector: str = "auto",
    confidence_threshold: float = 0.7,
    fallback_encodings: list[str] | None = None,
) -> str:
    """
    Decode raw bytes, detecting the encoding when asked to.

    Args:
        raw_data: Bytes to decode
        encoding: Codec name, or 'auto' to detect
        detector: Detection method for 'auto'
        confidence_threshold: Minimum confidence to trust detection
        fallback_encodings: Codecs tried when detection fails

    Returns:
        Decoded text

    Raises:
        UnicodeDecodeError: If an explicit encoding fails
        LookupError: If an explicit encoding is unknown
        ValueError: If no candidate encoding can decode the data
    """
    if encoding != "auto":
        return raw_data.decode(encoding)

    if raw_data.startswith(b"\xef\xbb\xbf"):
        return raw_data.decode("utf-8-sig")

    candidates: list[str] = []
    detected, confidence = detect_encoding(raw_data, detector, confidence_threshold)
    logger.debug(f"Detected encoding: {detected} (confidence: {confidence})")
    if detected and (confidence >= confidence_threshold or detector == "universal"):
        candidates.append(detected)
    candidates.extend(fallback_encodings if fallback_encodings is not None else DEFAULT_FALLBACK_ENCODINGS)

    for candidate in candidates:
        try:
            return raw_data.decode(candidate)
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with {candidate}: {e}")

    raise ValueError(f"Unable to decode input with any of: {', '.join(candidates)}")


def _read_raw(source: str | Path, stdin: BinaryIO | None = None) -> bytes:
    if str(source) == STDIN_NAME:
        return (stdin or sys.stdin.buffer).read()
    return Path(source).read_bytes()


def read_lines(
    source: str | Path,
    encoding: str = "auto",
    detector: str = "auto",
    confidence_threshold: float = 0.7,
    fallback_encodings: list[str] | None = None,
    stdin: BinaryIO | None = None,
) -> list[str]:
    """
    Read the lines of a text file, or of stdin when source is '-'.

    Args:
        source: File path or '-'
        encoding: Codec name, or 'auto' to detect
        detector: Detection method for 'auto'
        confidence_threshold: Minimum confidence to trust detection
        fallback_encodings: Codecs tried when detection fails
        stdin: Binary stream used for '-' (default: sys.stdin.buffer)

    Returns:
        Lines without line terminators

    Raises:
        OSError: If the file cannot be read
        ValueError: If the content cannot be decoded
    """
    raw_data = _read_raw(source, stdin)
    logger.debug(f"Read {len(raw_data)} bytes from {source}")
    try:
        text = decode_bytes(raw_data, encoding, detector, confidence_threshold, fallback_encodings)
    except (UnicodeDecodeError, LookupError) as e:
        raise ValueError(f"Cannot decode {source} as {encoding}: {e}") from e
    return text.splitlines()
