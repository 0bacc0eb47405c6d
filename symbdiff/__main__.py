import sys

from symbdiff.symbdiff import main

sys.exit(main())
