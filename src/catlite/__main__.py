# src/catlite/__main__.py
import sys

from catlite.cli import main

if __name__ == "__main__":
    sys.exit(main())
