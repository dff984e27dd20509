"""
Main entry point for running cart_price_transform as a module.

This allows the package to be run with: python -m cart_price_transform
"""

from .src.cli import main

if __name__ == '__main__':
    main()
