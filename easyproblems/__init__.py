"""Solutions to short introductory programming-contest problems.

Submodules: counting, strings, sequences and the cli command.
"""

__version__ = "0.1.0"
__all__ = ["counting", "strings", "sequences", "cli"]