import sys

from shellfav.cli import main

sys.exit(main())
