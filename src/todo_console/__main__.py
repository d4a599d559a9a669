# src/todo_console/__main__.py

from .cli.main import main

main()
