import sys

from solunar.cli import main

sys.exit(main())
