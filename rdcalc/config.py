"""Configuration management for the evaluator."""
import os
from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

# Width of the signed integers the evaluator computes with
VALUE_BITS = int(os.getenv("VALUE_BITS", "64"))

# 0 disables the limit
MAX_NESTING_DEPTH = int(os.getenv("MAX_NESTING_DEPTH", "64"))
MAX_EXPRESSION_LENGTH = int(os.getenv("MAX_EXPRESSION_LENGTH", "10000"))

NEGATION_BELOW_POWER = _flag("NEGATION_BELOW_POWER")
SHOW_TRACE = _flag("SHOW_TRACE")
