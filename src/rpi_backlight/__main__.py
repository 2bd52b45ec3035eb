from __future__ import annotations

import sys

from rpi_backlight.cli import main

sys.exit(main())
