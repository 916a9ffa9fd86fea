import sys

from cubic.demo import main

sys.exit(main())
