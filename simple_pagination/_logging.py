import logging
from typing import Any

# Create the library logger
logger = logging.getLogger("simple_pagination")

# Add NullHandler to prevent "No handlers could be found" warnings
# if the application doesn't configure logging.
logger.addHandler(logging.NullHandler())


def describe_callback(callback: Any) -> str:
    """
    Returns a short, human readable name for a callback, for log context.
    Lambdas and partials are rendered by their qualified name or type.
    """
    if callback is None:
        return "<unset>"
    try:
        module = getattr(callback, "__module__", None)
        name = getattr(callback, "__qualname__", None) or type(callback).__qualname__
        return f"{module}.{name}" if module else name
    except Exception:
        return "<unnamed>"
