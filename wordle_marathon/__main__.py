import sys

from wordle_marathon.cli import main

sys.exit(main())
