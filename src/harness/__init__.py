from harness.session import DEFAULT_MIDDLEWARE, HarnessSession

__all__ = [
    "DEFAULT_MIDDLEWARE",
    "HarnessSession",
]
