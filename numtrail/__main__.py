"""Allow ``python -m numtrail``."""

from numtrail.cli import main

if __name__ == "__main__":
    main()
