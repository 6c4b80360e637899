from safenet.server import run

run()
