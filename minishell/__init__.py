"""Building blocks of a small shell: character, byte and string helpers,
formatted output, quote removal, error messages and stream redirection."""

__version__ = "0.1.0"
__all__ = [
    "chars",
    "memory",
    "strings",
    "search",
    "output",
    "quotes",
    "errors",
    "redirect",
]