"""Run cronexpand as a module."""

from cronexpand.cli.commands import app


def main() -> None:
    """Entrypoint for `python -m cronexpand`."""
    app()


if __name__ == "__main__":
    main()
