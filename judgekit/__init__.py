"""Solutions to classic online-judge problems as reusable functions and a XOR segment tree."""

__version__ = "0.1.0"
__all__ = ["beecrowd", "codeforces", "leetcode", "strings", "xor_segment_tree"]