"""Load and validate the example browser's YAML configuration.

This subpackage parses a ``browser.yaml`` file describing the navigation list
(examples, subexamples, section dividers and plain links), the configured
colour scheme, the host's panicked flag, the notice copy, and optional
per-mode palette overrides. The primary entry point is
:func:`load_browser_config`, which validates every field and returns a
:class:`BrowserConfig` ready for the shell builder.

Examples
--------
>>> from pathlib import Path
>>> from example_browser.config import load_browser_config
>>> config = load_browser_config(Path("browser.yaml"))  # doctest: +SKIP
>>> config.color_scheme  # doctest: +SKIP
<ColorScheme.AUTO: 'auto'>
"""

from .loader import load_browser_config
from .models import DEFAULT_NOTICE, BrowserConfig, BrowserConfigError

__all__ = [
    "DEFAULT_NOTICE",
    "BrowserConfig",
    "BrowserConfigError",
    "load_browser_config",
]
