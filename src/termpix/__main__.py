from termpix.cli.main import main

main()
