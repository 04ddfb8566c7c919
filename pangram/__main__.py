import sys

from pangram.main import main

sys.exit(main())
