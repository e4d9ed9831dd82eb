import sys

from tagstyle.app import main

sys.exit(main())
