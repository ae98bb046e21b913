from checklist.cli.main import main

main()
