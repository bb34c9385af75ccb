from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

"""Application entry point.

`python run.py` prints the demonstration catalog; any arguments are passed
to the bibliotheque CLI (e.g. `python run.py serve --port 5054`).
"""

import sys

from bibliotheque.cli import main

if __name__ == '__main__':
    sys.exit(main())
