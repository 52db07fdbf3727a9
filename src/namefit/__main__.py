"""Run namefit as ``python -m namefit``."""

from namefit.cli import main

if __name__ == "__main__":
    main()
