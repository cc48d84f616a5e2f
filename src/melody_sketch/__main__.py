import sys

from melody_sketch.cli import main

sys.exit(main())
