import sys

from pyparkir.cli import main

sys.exit(main())
