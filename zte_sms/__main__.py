"""
Main entry point for the zte_sms package.

Allows running the client as: python -m zte_sms
"""

import sys

from zte_sms.cli import main

if __name__ == "__main__":
    sys.exit(main())
