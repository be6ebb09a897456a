"""Allow running leave as ``python -m leave``."""

from leave.cli.main import run

if __name__ == "__main__":
    run()
