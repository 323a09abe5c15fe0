"""Smart text authoring helpers and a screenplay formatter."""

__all__ = [
    "adapters",
    "actions",
    "buffer",
    "config",
    "editor",
    "keymaps",
    "runtime",
    "screenplay",
]

__version__ = "0.1.0"
