"""Launcher script for the Mortgage Calculator (used as the build entry point)."""
from mortgage_calc.main import main

if __name__ == "__main__":
    main()
