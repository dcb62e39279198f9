"""
Entry point for running goswitch as a module.

Usage: python -m goswitch [command] [version]
"""

from goswitch.cli.parser import main

if __name__ == "__main__":
    main()
