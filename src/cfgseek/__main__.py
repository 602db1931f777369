"""Allow ``python -m cfgseek``."""

from cfgseek.cli.app import main

if __name__ == "__main__":
    main()
