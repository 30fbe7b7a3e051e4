from bintree.cli.app import app

app(prog_name="bintree")
