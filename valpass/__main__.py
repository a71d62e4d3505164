"""
valpass Module Entry Point
===========================

Allows running the valpass CLI via: python -m valpass
"""

from valpass.cli import main

if __name__ == "__main__":
    main()
