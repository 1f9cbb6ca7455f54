#!/usr/bin/env python3
"""Runner script for zk from a source checkout."""

import sys
import os
from pathlib import Path

# Add the project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

# Load environment variables (ZK_NOTEBOOK_DIR, ZK_LOG_LEVEL...) from .env if it exists,
# python-dotenv comes with the dev extra
env_file = Path(__file__).parent / ".env"
if env_file.exists():
    from dotenv import load_dotenv
    load_dotenv(env_file)

from zk.main import main

if __name__ == "__main__":
    main()
