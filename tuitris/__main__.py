import sys

from tuitris.cli import main

sys.exit(main())
