import sys

from listing_autocompleter.cli import main

sys.exit(main())
