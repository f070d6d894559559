from src.shell.cli import main

main()
