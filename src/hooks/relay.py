"""Hook for interpreting relay-bot messages.

Some channels use a relay bot to mirror other networks into the channel. The
bot speaks every remote event as an ordinary chat line:

    <alice> hello there
    * alice waves
    *** [net1] bob (b@host1) has joined the channel
    *** [net1] bob has left the channel (bye)
    *** [net1] bob has signed off (Quit: bye)
    *** [net1] bob changed nick to robert

This hook turns those lines back into native join/part/quit/nick/chat
messages so they render like events from the local network. Remote nicknames
of membership events are suffixed with ``@server`` so the same nick on two
bridged networks stays distinct.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from ..config.model import DEFAULT_RELAY_CONFIG, RelayConfig
from ..constants import RELAY_HOOK_NAME
from ..errors.internal import RuleDefinitionError
from ..irc.identifier import Identifier, mk_id
from ..irc.message import Action, Join, Nick, Part, Privmsg, ProtocolMessage, Quit
from ..irc.user_info import UserInfo, user_info
from ..logs.logger import logger
from .hook import PASS, MessageHook, MessageResult, ReplaceMessage

__all__ = [
    "DEFAULT_RULES",
    "RelayRewriter",
    "RewriteRule",
    "relay_hook",
    "verify_rules",
]

Synthesizer = Callable[[Identifier, tuple[str, ...]], ProtocolMessage]


@dataclass(frozen=True, slots=True)
class RewriteRule:
    """A relay line pattern and the message it stands for.

    ``synthesize`` receives the relay channel and exactly ``arity`` captured
    strings; groups that did not take part in the match are passed as ``""``.
    """

    name: str
    pattern: re.Pattern[str]
    arity: int
    synthesize: Synthesizer

    def apply(self, channel: Identifier, text: str) -> ProtocolMessage | None:
        match = self.pattern.fullmatch(text)
        if match is None:
            return None
        captures = match.groups(default="")
        if len(captures) != self.arity:
            return None
        return self.synthesize(channel, captures)


def _remote_nick(nick: str, server: str) -> str:
    return f"{nick}@{server}"


def _chat_msg(chan: Identifier, captures: tuple[str, ...]) -> ProtocolMessage:
    nick, text = captures
    return Privmsg(user_info(nick), chan, text)


def _action_msg(chan: Identifier, captures: tuple[str, ...]) -> ProtocolMessage:
    nick, text = captures
    return Action(user_info(nick), chan, text)


def _join_msg(chan: Identifier, captures: tuple[str, ...]) -> ProtocolMessage:
    server, nick, user, host = captures
    return Join(UserInfo(mk_id(_remote_nick(nick, server)), user, host), chan)


def _part_msg(chan: Identifier, captures: tuple[str, ...]) -> ProtocolMessage:
    server, nick, reason_outer, reason = captures
    return Part(
        user_info(_remote_nick(nick, server)),
        chan,
        reason if reason_outer else None,
    )


def _quit_msg(chan: Identifier, captures: tuple[str, ...]) -> ProtocolMessage:
    server, nick, reason = captures
    return Quit(user_info(_remote_nick(nick, server)), reason)


def _nick_msg(chan: Identifier, captures: tuple[str, ...]) -> ProtocolMessage:
    server, old, new = captures
    return Nick(user_info(_remote_nick(old, server)), mk_id(_remote_nick(new, server)))


# Compiled at import; a typo here fails loudly at start-up.
CHAT_RE = re.compile(r"^<([^>]+)> (.*)$")
ACTION_RE = re.compile(r"^\* ([^ ]+) (.*)$")
JOIN_RE = re.compile(
    r"^\*\*\* \[([^\]]+)\] ([^ ]+) \(([^@]+)@([^)]+)\) has joined the channel$"
)
PART_RE = re.compile(r"^\*\*\* \[([^\]]+)\] ([^ ]+) has left the channel( \((.*)\))?$")
QUIT_RE = re.compile(r"^\*\*\* \[([^\]]+)\] ([^ ]+) has signed off \((.*)\)$")
NICK_RE = re.compile(r"^\*\*\* \[([^\]]+)\] ([^ ]+) changed nick to ([^ ]+)$")

# Order matters: the first matching rule wins.
DEFAULT_RULES: tuple[RewriteRule, ...] = (
    RewriteRule("chat", CHAT_RE, 2, _chat_msg),
    RewriteRule("action", ACTION_RE, 2, _action_msg),
    RewriteRule("join", JOIN_RE, 4, _join_msg),
    RewriteRule("part", PART_RE, 4, _part_msg),
    RewriteRule("quit", QUIT_RE, 3, _quit_msg),
    RewriteRule("nick", NICK_RE, 3, _nick_msg),
)


def verify_rules(rules: Sequence[RewriteRule]) -> None:
    """Check every rule's pattern has exactly ``arity`` capture groups.

    Raises:
        RuleDefinitionError: On the first inconsistent rule.
    """
    for rule in rules:
        if rule.pattern.groups != rule.arity:
            logger.log_event(
                "relay",
                "rule_invalid",
                level=logging.ERROR,
                human=f"Rewrite rule {rule.name} has {rule.pattern.groups} groups, expected {rule.arity}",
                rule=rule.name,
            )
            raise RuleDefinitionError(rule.name, arity=rule.arity, groups=rule.pattern.groups)
    logger.log_event("relay", "rules_verified", level=logging.DEBUG, count=len(rules))


verify_rules(DEFAULT_RULES)


class RelayRewriter:
    """Rewrite relay-bot chat lines into native messages.

    Rules are not checked here: a custom rule list whose pattern and arity
    disagree simply never matches.
    """

    def __init__(
        self,
        config: RelayConfig = DEFAULT_RELAY_CONFIG,
        rules: Sequence[RewriteRule] = DEFAULT_RULES,
    ) -> None:
        self.config = config
        self.rules = tuple(rules)
        self._nick = config.nick_id
        self._channel = config.channel_id

    def is_relay_line(self, msg: ProtocolMessage) -> bool:
        return (
            isinstance(msg, Privmsg)
            and msg.src.nick == self._nick
            and msg.channel == self._channel
        )

    def rewrite(self, msg: ProtocolMessage) -> MessageResult:
        if not isinstance(msg, Privmsg) or not self.is_relay_line(msg):
            return PASS
        for rule in self.rules:
            replacement = rule.apply(msg.channel, msg.text)
            if replacement is not None:
                logger.log_event(
                    "relay",
                    "rewrite",
                    level=logging.DEBUG,
                    hook=RELAY_HOOK_NAME,
                    channel=msg.channel.text,
                    rule=rule.name,
                )
                return ReplaceMessage(replacement)
        logger.log_event(
            "relay",
            "no_match",
            level=logging.DEBUG,
            hook=RELAY_HOOK_NAME,
            channel=msg.channel.text,
        )
        return PASS


def relay_hook(config: RelayConfig = DEFAULT_RELAY_CONFIG) -> MessageHook:
    return MessageHook(RELAY_HOOK_NAME, False, RelayRewriter(config).rewrite)
