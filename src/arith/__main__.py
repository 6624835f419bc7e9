"""Allow ``python -m arith``."""

from arith.cli import main

main()
