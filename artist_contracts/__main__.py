"""Entry point for python -m artist_contracts"""

from artist_contracts.cli.main import app

if __name__ == "__main__":
    app()
