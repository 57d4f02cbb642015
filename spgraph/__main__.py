from spgraph.cli import main

main()
