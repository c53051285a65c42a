import sys

from hunger_pool.cli.app import main

sys.exit(main())
