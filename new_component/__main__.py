"""Allow ``python -m new_component``."""

from new_component.cli import main

if __name__ == "__main__":
    main()
