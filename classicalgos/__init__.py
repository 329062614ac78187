"""Classic algorithms and data structures for plain Python values, plus small TCP and UDP exchanges."""

__version__ = "0.1.0"

__all__ = [
    "counting",
    "dynamic",
    "games",
    "greedy",
    "intset",
    "linked_list",
    "numbers",
    "searching",
    "sorting",
    "stack",
    "tcp",
    "tree",
    "udp",
]