"""Allow ``python -m styled_variants``."""

import sys

from styled_variants.cli.main import main

sys.exit(main())
