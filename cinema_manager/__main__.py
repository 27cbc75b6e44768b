import sys

from cinema_manager.cli import main

sys.exit(main())
