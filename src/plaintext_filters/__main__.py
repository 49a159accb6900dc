from plaintext_filters.cli.main import main

main()
