from marketplace.main import cli

cli()
