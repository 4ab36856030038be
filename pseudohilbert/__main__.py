import sys

from pseudohilbert.cli import main

sys.exit(main())
