import sys

from spellgate.main import main

sys.exit(main())
