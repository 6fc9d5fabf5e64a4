"""Allow ``python -m devopsfetch``."""

from devopsfetch.cli import cli

if __name__ == "__main__":
    cli(prog_name="devopsfetch")
