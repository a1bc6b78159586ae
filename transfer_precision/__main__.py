from transfer_precision.cli import main

main()
