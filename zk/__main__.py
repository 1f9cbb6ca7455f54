"""Allow running zk with ``python -m zk``."""

from .main import main

if __name__ == "__main__":
    main()
