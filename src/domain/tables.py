"""Static lookup tables used by tag normalization and scoring.

Extend the tables here; the algorithms only read them.
"""

from types import MappingProxyType

# Aliases -> canonical tag. Canonical values must map to themselves when
# looked up again (or be absent from the keys) so normalization stays idempotent.
TAG_SYNONYMS = MappingProxyType(
    {
        "dp": "dynamic-programming",
        "dynamic programming": "dynamic-programming",
        "bfs": "breadth-first-search",
        "dfs": "depth-first-search",
        "binary search": "binary-search",
        "two pointers": "two-pointers",
        "hash table": "hash-table",
        "hash map": "hash-table",
        "hashmap": "hash-table",
        "hashing": "hash-table",
        "linked list": "linked-list",
        "divide and conquer": "divide-and-conquer",
        "greedy algorithm": "greedy",
        "sorting algorithm": "sorting",
        "graph theory": "graph",
        "tree traversal": "tree",
        "sliding window": "sliding-window",
        "priority queue": "heap",
        "math": "mathematics",
        "maths": "mathematics",
        "string manipulation": "string",
        "strings": "string",
        "arrays": "array",
        "matrix": "matrix",
        "2d array": "matrix",
        "bit manipulation": "bit-manipulation",
        "palindrome": "palindrome",
        "palindromic": "palindrome",
        "subarray": "subarray",
        "contiguous": "subarray",
        "kadane": "subarray",
        "subsequence": "subsequence",
        "lis": "subsequence",
        "lcs": "subsequence",
        "intervals": "intervals",
        "merge intervals": "intervals",
        "overlapping": "intervals",
        "islands": "islands",
        "connected components": "islands",
        "flood fill": "islands",
        "cycle": "cycle",
        "cycle detection": "cycle",
        "loop": "cycle",
        "anagram": "anagram",
        "anagrams": "anagram",
        "permutation": "permutation",
        "stock": "stock",
        "buy sell": "stock",
        "trading": "stock",
        "path sum": "path-sum",
        "path": "path-sum",
        "topological": "topological-sort",
        "topo sort": "topological-sort",
        "backtrack": "backtracking",
        "recursion": "backtracking",
        "prefix": "prefix-sum",
        "prefix sum": "prefix-sum",
        "cumulative": "prefix-sum",
        "monotonic": "monotonic-stack",
        "monotone": "monotonic-stack",
        "union find": "union-find",
        "disjoint set": "union-find",
        "dsu": "union-find",
        "cache": "design",
        "lru": "design",
        "lfu": "design",
        "zigzag": "zigzag",
        "zig-zag": "zigzag",
        "zig zag": "zigzag",
        "z-shape": "zigzag",
        "simulation": "simulation",
        "simulate": "simulation",
        "pattern": "pattern",
    }
)

# Difficulty label or judge rating -> ordinal 1 (easiest) .. 5 (hardest)
DIFFICULTY_LEVELS = MappingProxyType(
    {
        "easy": 1,
        "medium": 3,
        "hard": 5,
        "school": 1,
        "basic": 1,
        "beginner": 1,
        "800": 1,
        "900": 1,
        "1000": 1,
        "1100": 2,
        "1200": 2,
        "1300": 2,
        "1400": 3,
        "1500": 3,
        "1600": 3,
        "1700": 4,
        "1800": 4,
        "1900": 4,
        "2000": 5,
        "2100": 5,
        "2200": 5,
    }
)

# Upper rating bound (inclusive) -> ordinal, for ratings not listed above
RATING_BANDS = ((1000, 1), (1300, 2), (1600, 3), (1900, 4))
MAX_DIFFICULTY_LEVEL = 5
DEFAULT_DIFFICULTY_LEVEL = 3

TITLE_STOP_WORDS = frozenset({"the", "a", "an", "of", "in", "to", "for", "problem"})

# Keyword patterns (whole words) -> I/O shape tag
IO_SHAPE_KEYWORDS = MappingProxyType(
    {
        "array": ("array", "list"),
        "matrix": ("matrix", "grid"),
        "string": ("string",),
        "integer": ("integer", "number"),
        "tree": ("tree",),
        "graph": ("graph", "edge", "edges"),
    }
)
