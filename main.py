# main.py
import sys

from chainlens.cli import main

if __name__ == "__main__":
    # Default to serving the API when no command is given
    sys.exit(main(sys.argv[1:] or ["serve"]))
