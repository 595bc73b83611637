"""Run with: python -m losscurve"""
import sys

from losscurve.main import main

if __name__ == "__main__":
    sys.exit(main())
