"""
Entry point for running hnsearch as a module: python -m hnsearch
"""

from hnsearch.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
