"""Classic algorithm solutions: linked lists, trees, arrays, strings, grids, bits and number puzzles."""

__version__ = "0.1.0"

__all__ = [
    "arithmetic",
    "arrays",
    "bits",
    "formatting",
    "grids",
    "heap_sort",
    "linked_list",
    "min_stack",
    "palindromes",
    "parentheses",
    "text",
    "trees",
]