"""Entry point for ``python -m chantier``."""

from chantier.api import run_server


def main() -> None:
    """Launch the budget API server."""
    run_server()


if __name__ == "__main__":
    main()
