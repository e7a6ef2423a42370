"""
Entry point for running solscaffold as a module.

Usage:
    python -m solscaffold test --contract-name Counter
    python -m solscaffold router --name MyRouter ModuleA ModuleB
"""

from solscaffold.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
