"""Tests for telegram2discord/rendering/entities.py."""

from unittest.mock import MagicMock

from telegram2discord.members import Member, MemberDirectory
from telegram2discord.models import MessageEntity, User
from telegram2discord.rendering.entities import render_entities, utf16_offset_to_index


def _e(type_: str, offset: int, length: int, **kwargs) -> MessageEntity:
    return MessageEntity(type=type_, offset=offset, length=length, **kwargs)


def _render(text, entities, members=None):
    return render_entities(text, entities, members or MemberDirectory())


class TestUtf16OffsetToIndex:
    def test_ascii(self):
        assert utf16_offset_to_index("hello", 3) == 3

    def test_zero(self):
        assert utf16_offset_to_index("hello", 0) == 0

    def test_astral_char_counts_twice(self):
        text = "😀ab"
        assert utf16_offset_to_index(text, 2) == 1
        assert utf16_offset_to_index(text, 3) == 2

    def test_past_end(self):
        assert utf16_offset_to_index("ab", 10) == 2


class TestRenderEntities:
    """Tests for render_entities."""

    def test_none_text(self):
        assert _render(None, []) == ""

    def test_empty_text(self):
        assert _render("", [_e("bold", 0, 0)]) == ""

    def test_no_entities(self):
        assert _render("plain *text*", []) == "plain *text*"

    def test_simple_wraps(self):
        assert _render("bold", [_e("bold", 0, 4)]) == "**bold**"
        assert _render("it", [_e("italic", 0, 2)]) == "*it*"
        assert _render("un", [_e("underline", 0, 2)]) == "__un__"
        assert _render("st", [_e("strikethrough", 0, 2)]) == "~~st~~"
        assert _render("sp", [_e("spoiler", 0, 2)]) == "||sp||"

    def test_inline_code(self):
        assert _render("run ls now", [_e("code", 4, 2)]) == "run `ls` now"

    def test_pre_with_language(self):
        result = _render("print(1)", [_e("pre", 0, 8, language="python")])
        assert result == "```python\nprint(1)```"

    def test_text_link(self):
        result = _render("see docs", [_e("text_link", 4, 4, url="https://x.org")])
        assert result == "see [docs](https://x.org)"

    def test_url_passthrough(self):
        assert _render("https://x.org", [_e("url", 0, 13)]) == "https://x.org"

    def test_nested_entities(self):
        # bold "hello world", italic "world"
        result = _render("hello world", [_e("bold", 0, 11), _e("italic", 6, 5)])
        assert result == "**hello *world***"

    def test_offsets_after_emoji(self):
        result = _render("😀 hi", [_e("bold", 3, 2)])
        assert result == "😀 **hi**"

    def test_blockquote(self):
        assert _render("a\nb", [_e("blockquote", 0, 3)]) == "> a\n> b"

    def test_mention_resolved(self):
        members = MemberDirectory([Member(id="7", display_name="alice")])
        assert _render("hi @alice", [_e("mention", 3, 6)], members) == "hi <@7>"

    def test_mention_unresolved(self):
        assert _render("hi @alice", [_e("mention", 3, 6)]) == "hi @alice"

    def test_text_mention_by_first_name(self):
        members = MemberDirectory([Member(id="8", display_name="Ann")])
        entity = _e("text_mention", 0, 5, user=User(id=5, first_name="Ann"))
        assert _render("Annie!", [entity], members) == "<@8>!"

    def test_text_mention_unresolved(self):
        entity = _e("text_mention", 0, 3, user=User(id=5, first_name="Ann"))
        assert _render("Ann", [entity]) == "Ann"

    def test_unknown_type_passthrough(self):
        assert _render("abc", [_e("something_new", 0, 3)]) == "abc"

    def test_lookup_gets_bridge(self):
        members = MagicMock()
        members.find_member_id.return_value = None
        bridge = MagicMock()
        render_entities("@bob", [_e("mention", 0, 4)], members, bridge)
        members.find_member_id.assert_called_once_with("bob", bridge)
