from jetcycle.cli.main import main

main()
