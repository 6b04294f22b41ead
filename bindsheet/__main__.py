"""Module entrypoint for ``python -m bindsheet``.

All argument parsing and rendering setup happen in ``bindsheet.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
