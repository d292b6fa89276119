from scanparse.cli import cli

cli(prog_name="scanparse")
