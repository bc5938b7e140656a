import sys

from nttint.main import main

sys.exit(main())
