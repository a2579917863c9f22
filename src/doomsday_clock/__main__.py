import sys

from doomsday_clock.cli import main

if __name__ == "__main__":
    sys.exit(main())
