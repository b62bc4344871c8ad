"""Entry point for running apiref as a module: python -m apiref.

This enables:
    python -m apiref render records.json --package mypkg --out-dir site
"""

from apiref.api.cli.main import main

if __name__ == "__main__":
    main()
