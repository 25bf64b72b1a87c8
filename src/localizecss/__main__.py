from localizecss.cli.main import main

main()
