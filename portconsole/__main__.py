"""Allow running as ``python -m portconsole``."""

from portconsole.app import main

main()
