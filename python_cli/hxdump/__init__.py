__all__ = [
    "config",
    "constants",
    "dumper",
    "errors",
    "layout",
    "renderer"
]
