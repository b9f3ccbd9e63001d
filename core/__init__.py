"""core package initialization.

Making `core` an explicit package so imports like `import core.state`
work reliably when running `main.py` from the project root.
"""

__all__ = ["app", "constants", "errors", "scene", "session", "settings", "state"]
