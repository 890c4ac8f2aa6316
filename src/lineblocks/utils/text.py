"""Text helpers shared by the line filters."""

from __future__ import annotations

import html as html_module


def escape_code(text: str) -> str:
    """Escape text for insertion inside ``<pre><code>``.

    Only ``&``, ``<`` and ``>`` are converted; quotes stay as they are.

    Examples:
        >>> escape_code('<a href="x">&</a>')
        '&lt;a href="x"&gt;&amp;&lt;/a&gt;'
    """
    if not text:
        return ""
    return html_module.escape(text, quote=False)
