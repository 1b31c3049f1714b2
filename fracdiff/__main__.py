import sys

from fracdiff.cli import main

sys.exit(main())
