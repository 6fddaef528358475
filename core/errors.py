# core/errors.py
from __future__ import annotations

class ContractViolation(AssertionError):
    """A caller broke a precondition of the core (out-of-bounds access,
    double-clearing a cell, asking for zero obstacles, ...).

    Raised explicitly rather than through `assert` so it survives `python -O`.
    The core never catches it.
    """
