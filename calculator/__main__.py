import sys

from calculator.repl import main

sys.exit(main())
