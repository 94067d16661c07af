"""Classic programming drills: number theory, searching, sorting, strings, patterns, paging and small data structures."""

__version__ = "0.1.0"