"""Allow running smokereport as a module: python -m smokereport."""

from smokereport.cli import main

if __name__ == "__main__":
    main()
