from ghrel.cli.app import main

main()
