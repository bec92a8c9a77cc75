# cli/main.py
import click

from core.config import configure_logging
from .commands.db import db
from .commands.serve import serve

@click.group()
@click.option('--log-level', default=None, help="Logging level (defaults to LOG_LEVEL or INFO)")
def cli(log_level):
    """Local Library CLI"""
    configure_logging(log_level.upper() if log_level else None)

cli.add_command(db)
cli.add_command(serve)

def main():
    """Entry point for the CLI"""
    cli()

if __name__ == '__main__':
    main()
