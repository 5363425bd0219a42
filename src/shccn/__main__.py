"""Allow ``python -m shccn``."""

from .cli import main

if __name__ == "__main__":
    main()
