from workboard.app import run

run()
