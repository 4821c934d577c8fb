"""Defaults for the command-line driver, overridable from the environment.

Values are kept as read; ``calculator.repl.parse_args`` converts and validates them so a bad
environment value is reported as a usage error.
"""
import os

LOG_LEVEL = os.getenv("CALCULATOR_LOG_LEVEL", "WARNING")
PRECISION = os.getenv("CALCULATOR_PRECISION", "6")
KEEP_GOING = os.getenv("CALCULATOR_KEEP_GOING", "").strip().lower() in {"1", "true", "yes", "on"}
