import sys

from note_compliance.cli import main

sys.exit(main())
