from .boardui import cli

cli(prog_name='mastermind')
