# -*- coding: utf-8 -*-
"""ccswitch: switch Claude Code between API providers."""

__version__ = "0.1.0"
