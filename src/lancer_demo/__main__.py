from lancer_demo.cli import cli

cli()
