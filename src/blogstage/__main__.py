from blogstage.cli import cli

cli()
