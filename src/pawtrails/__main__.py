from pawtrails.cli import main

main()
