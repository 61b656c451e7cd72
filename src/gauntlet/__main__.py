from gauntlet.cli.main import run

run()
