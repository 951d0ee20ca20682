from person_api.cli import main

main()
