# main.py - run the generator from a source checkout

import sys

from markov_textgen.cli import main

if __name__ == "__main__":
    sys.exit(main())
