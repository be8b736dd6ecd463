import sys

from fuzzkit.cli.main import main

sys.exit(main())
