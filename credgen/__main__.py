"""Run the generate-oauth command with ``python -m credgen``."""

from credgen.interface.cli import main

main()
