"""
solscaffold: scaffolding for Foundry projects.

Generates boilerplate forge test files and multi-module routers whose Yul
dispatcher binary-searches function selectors.
"""

__version__ = "0.1.0"
