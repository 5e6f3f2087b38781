from pixelcompare.cli import cli

cli()
