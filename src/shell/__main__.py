from src.shell.main import main

main()
