"""Allow running as ``python -m audkit``."""

from audkit.cli import main

if __name__ == "__main__":
    main()
