"""Message hooks applied to inbound messages before rendering."""

from .hook import (  # noqa: F401
    DROP,
    PASS,
    DropMessage,
    MessageHook,
    MessageResult,
    PassMessage,
    ReplaceMessage,
    run_hooks,
)
from .relay import DEFAULT_RULES, RelayRewriter, RewriteRule, relay_hook, verify_rules  # noqa: F401

__all__ = [
    "DEFAULT_RULES",
    "DROP",
    "PASS",
    "DropMessage",
    "MessageHook",
    "MessageResult",
    "PassMessage",
    "RelayRewriter",
    "ReplaceMessage",
    "RewriteRule",
    "relay_hook",
    "run_hooks",
    "verify_rules",
]
