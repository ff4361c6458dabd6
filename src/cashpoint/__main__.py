# src/cashpoint/__main__.py
import sys

from cashpoint.app import main

if __name__ == "__main__":
    sys.exit(main())
