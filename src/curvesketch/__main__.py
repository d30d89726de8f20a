"""
Run with: python -m curvesketch
"""
import sys

from curvesketch.main import main

if __name__ == "__main__":
    sys.exit(main())
