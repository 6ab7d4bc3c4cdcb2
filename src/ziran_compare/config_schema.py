#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# HERE IS THE CHANGELOG FOR THIS VERSION OF THE CODE:
# - Created module to hold the configuration template for ziran-sort
# - Added compare, sorting, input and logging sections
#

"""
config_schema.py - Configuration schema and default template for ziran-sort
"""

from .compare_options import ChineseNumberPolicy, NumberStringPolicy

CONFIG_FILENAME = "ziran_config.yml"

# Sections every configuration must contain, with a short description
REQUIRED_SECTIONS = {
    "compare": "Comparison policies (number/string precedence, numeral notation)",
    "sorting": "Sorting behaviour (reverse order, duplicates, whitespace)",
    "input": "Input file settings (encoding and detection)",
    "logging": "Logging configuration",
}

# Allowed values for enumerated settings, keyed by dot path.
# Compare policies are checked by CompareOptions, which also takes snake_case names.
VALID_VALUES = {
    "input.encoding_detector": ["universal", "chardet", "auto"],
    "logging.level": ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
}

# Expected types for scalar settings, keyed by dot path
VALUE_TYPES = {
    "sorting.reverse": bool,
    "sorting.unique": bool,
    "sorting.strip": bool,
    "sorting.skip_empty": bool,
    "input.encoding": str,
    "input.confidence_threshold": (int, float),
    "input.fallback_encodings": list,
    "logging.file_enabled": bool,
    "logging.file_path": str,
    "logging.format": str,
}

# Default configuration template with extensive comments
DEFAULT_CONFIG_TEMPLATE = f"""# ziran-sort Configuration File
# ============================
# Default settings for natural order sorting of mixed Chinese/Arabic numeral text.
# Any command-line arguments will override these settings.

# Comparison Settings
# -------------------
compare:
  # What sorts first when a number meets text at the same position:
  #   numberFirst - "1" < "a" (default)
  #   stringFirst - "a" < "1"
  number_string_policy: {NumberStringPolicy.NUMBER_FIRST.value}

  # How numbers written in different notations compare:
  #   mixed - by value only, 一 == 1 (default)
  #   first - Chinese numerals before Arabic numerals, whatever the value
  #   last  - Arabic numerals before Chinese numerals, whatever the value
  chinese_number_policy: {ChineseNumberPolicy.MIXED.value}

# Sorting Settings
# ----------------
sorting:
  # Sort in descending order (default: false)
  reverse: false

  # Drop lines that are identical after sorting (default: false)
  unique: false

  # Strip leading/trailing whitespace from each line (default: false)
  strip: false

  # Skip blank lines (default: true)
  skip_empty: true

# Input Settings
# --------------
input:
  # File encoding, or "auto" to detect it (default: auto)
  encoding: auto

  # Detection method: universal, chardet, auto (default: auto)
  encoding_detector: auto

  # Minimum detection confidence before trying fallbacks (default: 0.7)
  confidence_threshold: 0.7

  # Encodings tried when detection fails
  fallback_encodings:
    - utf-8
    - gb18030
    - big5
    - utf-16

# Logging Settings
# ----------------
logging:
  # Log level: DEBUG, INFO, WARNING, ERROR, CRITICAL (default: WARNING)
  level: WARNING

  # Log to file (default: false)
  file_enabled: false
  file_path: "ziran_sort.log"

  # Log format
  format: "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
"""
