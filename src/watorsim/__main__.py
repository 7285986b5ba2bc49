import sys

from watorsim.cli import main

sys.exit(main())
