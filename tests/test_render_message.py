from __future__ import annotations

from datetime import datetime

import pytest

from src.irc.identifier import mk_id
from src.irc.message import (
    Action,
    Cap,
    CapCommand,
    Error,
    Join,
    Kick,
    Mode,
    Nick,
    Notice,
    Part,
    Ping,
    Pong,
    Privmsg,
    ProtocolMessage,
    Quit,
    Reply,
    Topic,
    UnknownMsg,
)
from src.irc.user_info import UserInfo
from src.render.message import (
    ACCENT_ATTR,
    ALERT_ATTR,
    DEFAULT_RENDER_PARAMS,
    NOTICE_ATTR,
    POSITIVE_ATTR,
    QUIET_ATTR,
    SIGIL_ATTR,
    ErrorBody,
    ExitBody,
    MessageBody,
    MessageRenderer,
    RenderMode,
    RenderParams,
    ignore_image,
    metadata_img,
    nick_split,
    render,
)
from src.render.styled import EMPTY, Attr, Color, StyledText, cat, styled

NICK_ATTR = Attr(fore=Color.MAGENTA)
CHAN = mk_id("#haskell")
ALICE = UserInfo(mk_id("alice"), "al", "example.org")
BARE = UserInfo(mk_id("bob"))

NORMAL = RenderMode.NORMAL
DETAILED = RenderMode.DETAILED


def nick(text: str) -> StyledText:
    return styled(text, NICK_ATTR)


def body(
    renderer: MessageRenderer, msg: MessageBody, mode: RenderMode = NORMAL, sigils: str = ""
) -> StyledText:
    return renderer.body_image(mode, sigils, frozenset(), msg)


def test_normal_timestamp(renderer: MessageRenderer, when: datetime) -> None:
    image = renderer.render(when, DEFAULT_RENDER_PARAMS, Ping(()), NORMAL)
    assert image.spans[0].text == "23:15 "
    assert image.spans[0].attr == QUIET_ATTR


def test_detailed_timestamp(renderer: MessageRenderer, when: datetime) -> None:
    image = renderer.render(when, DEFAULT_RENDER_PARAMS, Ping(()), DETAILED)
    assert image.spans[0].text == "2016-07-24 23:15:10 "
    assert image.spans[0].attr == QUIET_ATTR


def test_status_sigils(renderer: MessageRenderer, when: datetime) -> None:
    params = RenderParams(status_sigils="@+")
    image = renderer.render(when, params, Error("x"), NORMAL)
    expected = cat(
        [
            styled("23:15 ", QUIET_ATTR),
            styled("("),
            styled("@+", ALERT_ATTR),
            styled(") "),
            styled("ERROR ", ALERT_ATTR),
            styled("x"),
        ]
    )
    assert image == expected


def test_no_status_sigils_renders_nothing(renderer: MessageRenderer, when: datetime) -> None:
    image = renderer.render(when, DEFAULT_RENDER_PARAMS, Error("x"), NORMAL)
    assert image.plain == "23:15 ERROR x"


def test_privmsg_normal(renderer: MessageRenderer, when: datetime) -> None:
    params = RenderParams(sender_sigils="@")
    image = renderer.render(when, params, Privmsg(ALICE, CHAN, "hi"), NORMAL)
    expected = cat(
        [
            styled("23:15 ", QUIET_ATTR),
            styled("@", SIGIL_ATTR),
            nick("alice"),
            styled(": hi"),
        ]
    )
    assert image == expected


def test_privmsg_detailed(renderer: MessageRenderer, when: datetime) -> None:
    image = renderer.render(when, DEFAULT_RENDER_PARAMS, Privmsg(ALICE, CHAN, "hi"), DETAILED)
    expected = cat(
        [
            styled("2016-07-24 23:15:10 chat ", QUIET_ATTR),
            nick("alice"),
            styled("!"),
            styled("al", QUIET_ATTR),
            styled("@"),
            styled("example.org", QUIET_ATTR),
            styled(": hi"),
        ]
    )
    assert image == expected


def test_detailed_user_info_omits_missing_parts(renderer: MessageRenderer) -> None:
    assert renderer.colored_user_info(DETAILED, BARE) == nick("bob")
    host_only = UserInfo(mk_id("bob"), None, "h")
    assert renderer.colored_user_info(DETAILED, host_only) == cat(
        [nick("bob"), styled("@"), styled("h", QUIET_ATTR)]
    )


def test_notice(renderer: MessageRenderer) -> None:
    assert body(renderer, Notice(BARE, CHAN, "psst")) == cat(
        [nick("bob"), styled(": ", ALERT_ATTR), styled("psst")]
    )
    assert body(renderer, Notice(BARE, CHAN, "psst"), DETAILED).plain == "note bob: psst"


def test_action(renderer: MessageRenderer) -> None:
    assert body(renderer, Action(BARE, CHAN, "waves"), sigils="+") == cat(
        [
            styled("* ", ACCENT_ATTR),
            styled("+", SIGIL_ATTR),
            nick("bob"),
            styled(" waves"),
        ]
    )
    assert body(renderer, Action(BARE, CHAN, "waves"), DETAILED).plain == "chat * bob waves"


def test_nick_change(renderer: MessageRenderer) -> None:
    msg = Nick(BARE, mk_id("robert"))
    assert body(renderer, msg) == cat([nick("bob"), styled(" became "), nick("robert")])
    assert body(renderer, msg, DETAILED).plain == "nick bob became robert"


def test_join_label_in_both_modes(renderer: MessageRenderer) -> None:
    assert body(renderer, Join(BARE, CHAN)) == styled("join ", QUIET_ATTR) + nick("bob")
    assert body(renderer, Join(BARE, CHAN), DETAILED) == styled("join ", QUIET_ATTR) + nick("bob")


def test_part_with_and_without_reason(renderer: MessageRenderer, markup) -> None:  # type: ignore[no-untyped-def]
    assert body(renderer, Part(BARE, CHAN, None)) == styled("part ", QUIET_ATTR) + nick("bob")
    assert body(renderer, Part(BARE, CHAN, "later")) == cat(
        [
            styled("part ", QUIET_ATTR),
            nick("bob"),
            styled(" (", QUIET_ATTR),
            styled("later"),
            styled(")", QUIET_ATTR),
        ]
    )
    assert markup.calls == ["later"]


def test_quit(renderer: MessageRenderer) -> None:
    assert body(renderer, Quit(BARE, None)).plain == "quit bob"
    assert body(renderer, Quit(BARE, "gone")).plain == "quit bob (gone)"
    assert body(renderer, Quit(ALICE, "gone"), DETAILED).plain == "quit alice!al@example.org (gone)"


def test_kick(renderer: MessageRenderer, markup) -> None:  # type: ignore[no-untyped-def]
    msg = Kick(ALICE, CHAN, mk_id("bob"), "spam")
    assert body(renderer, msg) == cat(
        [nick("alice"), styled(" kicked "), nick("bob"), styled(": spam")]
    )
    assert body(renderer, msg, DETAILED).plain == "kick alice!al@example.org kicked bob: spam"
    assert markup.calls == ["spam", "spam"]


def test_topic_has_no_label(renderer: MessageRenderer) -> None:
    msg = Topic(BARE, CHAN, "new topic")
    assert body(renderer, msg).plain == "bob changed topic to new topic"
    assert body(renderer, msg, DETAILED).plain == "bob changed topic to new topic"


def test_ping_pong(renderer: MessageRenderer, markup) -> None:  # type: ignore[no-untyped-def]
    assert body(renderer, Ping(("a", "b"))) == cat(
        [styled("PING"), styled("·", ACCENT_ATTR), styled("a"), styled("·", ACCENT_ATTR), styled("b")]
    )
    assert body(renderer, Pong(("srv",))).plain == "PONG·srv"
    assert body(renderer, Ping(())).plain == "PING"
    assert markup.calls == ["a", "b", "srv"]


def test_error(renderer: MessageRenderer) -> None:
    assert body(renderer, Error("Closing Link")) == styled("ERROR ", ALERT_ATTR) + styled("Closing Link")


def test_reply(renderer: MessageRenderer) -> None:
    assert body(renderer, Reply(1, ("me", "Welcome"))).plain == "001·me·Welcome"
    assert body(renderer, Reply(433, ())).plain == "433"


def test_unknown_with_and_without_prefix(renderer: MessageRenderer) -> None:
    assert body(renderer, UnknownMsg(None, "WALLOPS", ("hey",))).plain == "WALLOPS·hey"
    image = body(renderer, UnknownMsg(ALICE, "FOO", ("x", "y")), DETAILED)
    assert image.plain == "alice!al@example.org FOO·x·y"


def test_cap_args_are_raw(renderer: MessageRenderer, markup) -> None:  # type: ignore[no-untyped-def]
    assert body(renderer, Cap(CapCommand.ACK, ("sasl", "multi-prefix"))).plain == "ACK·sasl·multi-prefix"
    assert markup.calls == []


def test_mode_params_are_interspersed(renderer: MessageRenderer, markup) -> None:  # type: ignore[no-untyped-def]
    msg = Mode(ALICE, CHAN, ("+o", "bob"))
    assert body(renderer, msg, sigils="@") == cat(
        [
            styled("@", SIGIL_ATTR),
            nick("alice"),
            styled(" set mode: +o"),
            styled("·", ACCENT_ATTR),
            styled("bob"),
        ]
    )
    assert body(renderer, msg, DETAILED).plain == "mode alice!al@example.org set mode: +o·bob"
    assert body(renderer, Mode(BARE, CHAN, ())).plain == "bob set mode: "
    assert markup.calls == []


@pytest.mark.parametrize(
    ("msg", "label"),
    [
        (Nick(BARE, mk_id("rob")), "nick "),
        (Kick(BARE, CHAN, mk_id("x"), "r"), "kick "),
        (Notice(BARE, CHAN, "t"), "note "),
        (Privmsg(BARE, CHAN, "t"), "chat "),
        (Action(BARE, CHAN, "t"), "chat "),
        (Mode(BARE, CHAN, ("+v",)), "mode "),
    ],
)
def test_verb_labels_only_in_detailed_mode(renderer: MessageRenderer, msg: MessageBody, label: str) -> None:
    detailed = body(renderer, msg, DETAILED)
    normal = body(renderer, msg, NORMAL)
    assert detailed.spans[0] == styled(label, QUIET_ATTR).spans[0]
    # Omitted, not blanked: the normal line is exactly the detailed line minus the label.
    assert detailed.plain == label + normal.plain


@pytest.mark.parametrize(
    ("msg", "label"),
    [
        (Join(BARE, CHAN), "join "),
        (Part(BARE, CHAN, None), "part "),
        (Quit(BARE, None), "quit "),
    ],
)
def test_membership_labels_in_both_modes(renderer: MessageRenderer, msg: MessageBody, label: str) -> None:
    assert body(renderer, msg, NORMAL).plain.startswith(label)
    assert body(renderer, msg, DETAILED).plain.startswith(label)
    assert body(renderer, msg, NORMAL) == body(renderer, msg, DETAILED)


def test_highlight_marks_exactly_the_known_nicks(renderer: MessageRenderer) -> None:
    nicks = frozenset({mk_id("alice"), mk_id("bob")})
    image = renderer.parsed_text_with_highlight(nicks, "alice: hi bob")
    assert image == cat([nick("alice"), styled(": hi "), nick("bob")])
    assert image.plain == "alice: hi bob"


def test_highlight_is_case_insensitive_and_keeps_spelling(renderer: MessageRenderer) -> None:
    nicks = frozenset({mk_id("bob[m]")})
    image = renderer.parsed_text_with_highlight(nicks, "hey BOB{M}, and bobby")
    assert image == cat([styled("hey "), nick("BOB{M}"), styled(", and bobby")])


def test_control_character_skips_highlighting(renderer: MessageRenderer, markup) -> None:  # type: ignore[no-untyped-def]
    nicks = frozenset({mk_id("alice"), mk_id("bob")})
    text = "alice: hi \x02bob\x02"
    image = renderer.parsed_text_with_highlight(nicks, text)
    assert markup.calls == [text]
    assert image == styled(text)


def test_highlight_params_flow_through_render(renderer: MessageRenderer, when: datetime) -> None:
    params = RenderParams(highlight_nicks=frozenset({mk_id("carol")}))
    image = renderer.render(when, params, Privmsg(BARE, CHAN, "ping carol"), NORMAL)
    assert image.spans[-1] == nick("carol").spans[0]


def test_nick_split_is_lossless() -> None:
    text = "alice: hi bob! [x]|y `z`  ñ"
    parts = nick_split(text)
    assert "".join(parts) == text
    assert parts[:5] == ["alice", ": ", "hi", " ", "bob"]
    assert nick_split("") == []


def test_render_is_deterministic(when: datetime) -> None:
    params = RenderParams("@", "+", frozenset({mk_id("bob")}))
    msg = Privmsg(ALICE, CHAN, "hello bob \x0304red")
    first = render(when, params, msg, DETAILED)
    second = render(when, params, msg, DETAILED)
    assert first == second
    assert first.to_ansi() == second.to_ansi()
    assert MessageRenderer().render(when, params, msg, DETAILED) == first


def test_metadata_images() -> None:
    assert metadata_img(Quit(BARE, "x")) == (styled("x", ALERT_ATTR), mk_id("bob"))
    assert metadata_img(Part(BARE, CHAN, None)) == (styled("-", ALERT_ATTR), mk_id("bob"))
    assert metadata_img(Join(BARE, CHAN)) == (styled("+", POSITIVE_ATTR), mk_id("bob"))
    image, ident = metadata_img(Nick(BARE, mk_id("rob")))  # type: ignore[misc]
    assert ident is None
    assert image == cat(
        [styled("bob", QUIET_ATTR), styled("-", NOTICE_ATTR), styled("rob", QUIET_ATTR)]
    )


@pytest.mark.parametrize(
    "msg",
    [
        Privmsg(BARE, CHAN, "x"),
        Notice(BARE, CHAN, "x"),
        Kick(BARE, CHAN, mk_id("y"), "r"),
        Ping(()),
        Error("e"),
        UnknownMsg(None, "X", ()),
    ],
)
def test_other_messages_do_not_collapse(msg: ProtocolMessage) -> None:
    assert metadata_img(msg) is None


def test_ignore_image() -> None:
    assert ignore_image() == styled("I", NOTICE_ATTR)


def test_client_side_bodies(renderer: MessageRenderer, when: datetime) -> None:
    assert body(renderer, ExitBody()) == styled("Thread finished")
    error = ValueError("boom")
    assert body(renderer, ErrorBody(error)).plain == "Exception: ValueError('boom')"
    assert renderer.render(when, DEFAULT_RENDER_PARAMS, ExitBody()).plain == "23:15 Thread finished"


def test_empty_sender_sigils_add_nothing(renderer: MessageRenderer) -> None:
    assert body(renderer, Privmsg(BARE, CHAN, ""), sigils="") == nick("bob") + styled(": ")
    assert body(renderer, Privmsg(BARE, CHAN, "")) != EMPTY
