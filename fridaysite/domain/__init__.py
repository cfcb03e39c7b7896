"""Pure request-resolution helpers: paths, content types, errors.

Nothing in here touches FastAPI or the network, so the rules can be
unit-tested directly and shared with the smoke runner.
"""
__all__ = ["paths", "content_types", "errors", "context"]
