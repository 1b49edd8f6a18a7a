import sys

from .Cli import main

sys.exit(main())
