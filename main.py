# main.py - run the vote counter without installing the package

import sys

from vote_muncher.cli import main

if __name__ == "__main__":
    sys.exit(main())
