import sys

from minigrep.cli.main import main

sys.exit(main())
