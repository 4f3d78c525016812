"""Run the launcher with ``python -m botswarm.cli``."""

from botswarm.cli.app import app

if __name__ == "__main__":
    app()
