from dep_tree.cli import cli

cli()
