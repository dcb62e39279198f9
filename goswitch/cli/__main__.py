"""
Entry point for running the goswitch CLI as a module.

Usage: python -m goswitch.cli [command] [version]
"""

from .parser import main

if __name__ == "__main__":
    main()
