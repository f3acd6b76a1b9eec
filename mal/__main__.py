import sys

from mal.repl import main

sys.exit(main())
