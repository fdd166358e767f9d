import sys

from zipshell.cli_shell import main

if __name__ == "__main__":
    sys.exit(main())
