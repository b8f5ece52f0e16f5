import sys

from pong.app import main

if __name__ == "__main__":
    sys.exit(main())
