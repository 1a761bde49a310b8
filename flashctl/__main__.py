# flashctl/__main__.py
import sys

from flashctl.cli.run import main

sys.exit(main())
