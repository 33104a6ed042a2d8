"""Ripple launcher (Python-first, step-driven).

Core design goals:
- One-shot dispatch: init, run, help
- Idempotent init (bundled examples always win)
- Build-then-run with short-circuit on failure
- Centralized logging
"""

__all__ = []
