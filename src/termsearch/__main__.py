"""Allow running as ``python -m termsearch``."""

from termsearch.cli.app import app

if __name__ == "__main__":
    app()
