from shopsimulator.cli import main

main()
