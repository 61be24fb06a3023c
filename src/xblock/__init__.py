"""
xblock - single-use block fragments merged into host documents at build time.

A block fragment (``*.svelte.xblock``) is imported by exactly one host
document; its scripts, styles and template are merged into the host so the
block shares the host's lexical scope.
"""

__version__ = "1.0.0"
__all__ = ["__version__"]
