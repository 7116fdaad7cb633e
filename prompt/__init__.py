"""SPDX-License-Identifier: GPL-3.0-only

Unicode Prompt front-end glue package.

Re-exports key primitives for external callers.
"""

from .sink import CommandSink, DeliveryError, Sink, clipboard_sink, make_sink, type_sink  # noqa: F401
from .config import PromptConfig, default_data_file  # noqa: F401
from .session import UnicodePrompt, build_prompt  # noqa: F401
