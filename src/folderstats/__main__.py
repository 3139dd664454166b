import sys

from folderstats.presentation.cli import main

sys.exit(main())
