from cobrascaffold.cli import main

main()
