from __future__ import annotations

# Import so they can be registered in MAIN_COMMANDS
from . import query  # noqa
from .base import FAIL_EXCEPTIONS, MAIN_COMMANDS, run_main

__all__ = ["run_main", "MAIN_COMMANDS", "FAIL_EXCEPTIONS"]
