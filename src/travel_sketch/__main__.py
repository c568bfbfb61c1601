from travel_sketch.cli import cli

cli()
