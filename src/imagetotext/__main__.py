import sys

from imagetotext.cli import main

sys.exit(main())
