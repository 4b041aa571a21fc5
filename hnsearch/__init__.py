"""
hnsearch - Hacker News story search with persisted terms and local edits
"""

__version__ = "0.1.0"
