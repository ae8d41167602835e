import sys

from typed_enums.dump import main

sys.exit(main())
