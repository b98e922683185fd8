import sys

from es123.main import main

sys.exit(main())
