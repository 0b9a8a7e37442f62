import sys

from minidfa.cli import main


sys.exit(main())
