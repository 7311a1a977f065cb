from dagstore.cli import cli

cli()
