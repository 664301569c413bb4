"""Allow running as ``python -m wkstatus``."""
from .cli import main

main()
