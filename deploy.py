"""
Contract Deployment Entry Point
Runs scripts/deploy_contract.py
"""

import sys

from scripts.deploy_contract import main

if __name__ == "__main__":
    sys.exit(main())
