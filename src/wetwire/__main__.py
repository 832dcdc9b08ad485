import wetwire.cli


wetwire.cli.cli(prog_name='wetwire')
