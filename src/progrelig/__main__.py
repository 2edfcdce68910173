import sys

from progrelig.cli import main

sys.exit(main())
