"""Allow ``python -m eth_balance``."""
from .cli import main

if __name__ == "__main__":
    main()
