"""Module entrypoint for ``python -m includepaths``.

All argument parsing happens in ``includepaths.cli``.
"""

from .cli import main


if __name__ == "__main__":
    main()
