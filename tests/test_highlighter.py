"""Tests for regfind.highlighter — match wrapping with preserved casing."""

from regfind.highlighter import highlight, highlight_fields
from regfind.markup import Color, render, render_text, strip_markup
from regfind.models import Entry, EntryKind

from conftest import SHELL_LINK, RecordingTerminal


class TestHighlight:
    def test_wraps_match(self):
        assert highlight('ShellLink', 'link') == 'Shell#yellow#Link#'

    def test_keeps_original_casing(self):
        marked = highlight('IShellLinkW', 'SHELL')
        assert marked == 'I#yellow#Shell#LinkW'
        assert strip_markup(marked) == 'IShellLinkW'

    def test_every_occurrence(self):
        assert highlight('abcABCabc', 'abc') == '#yellow#abc##yellow#ABC##yellow#abc#'

    def test_no_match_unchanged(self):
        assert highlight('ShellLink', 'zzz') == 'ShellLink'

    def test_empty_fragment_unchanged(self):
        assert highlight('ShellLink', '') == 'ShellLink'

    def test_regex_characters_are_literal(self):
        assert highlight('a.b*c', '.b*') == 'a#yellow#.b*#c'

    def test_custom_color(self):
        assert highlight('server.dll', 'dll', color='cyan') == 'server.#cyan#dll#'

    def test_rendered_highlight(self):
        t = RecordingTerminal()
        render(highlight('IShellLinkW', 'link'), t)
        assert t.writes == [
            ('IShell', None, None),
            ('Link', Color.yellow, None),
            ('W', None, None),
        ]

    def test_color_word_between_matches_kept(self):
        marked = highlight('LinkRedLink', 'link')
        assert render_text(marked).plain == 'LinkRedLink'
        assert strip_markup(marked) == 'LinkRedLink'

    def test_color_pair_between_matches_kept(self):
        marked = highlight('abcred:whiteabc', 'abc')
        assert strip_markup(marked) == 'abcred:whiteabc'

    def test_color_word_between_matches_rendered_plain(self):
        t = RecordingTerminal()
        render(highlight('LinkRedLink', 'link'), t)
        assert ''.join(w[0] for w in t.writes) == 'LinkRedLink'
        assert [w for w in t.writes if w[1] is not None] == [
            ('Link', Color.yellow, None),
            ('Link', Color.yellow, None),
        ]

    def test_plain_word_between_matches_untouched(self):
        assert highlight('LinkFooLink', 'link') == '#yellow#Link#Foo#yellow#Link#'

    def test_adjacent_matches_render_separately(self):
        t = RecordingTerminal()
        render(highlight('abcabc', 'abc'), t)
        assert t.writes == [('abc', Color.yellow, None), ('abc', Color.yellow, None)]


class TestHighlightFields:
    def test_three_fields(self):
        entry = Entry(kind=EntryKind.classes, id=SHELL_LINK, name='ShellLink', server='shell32.dll')
        ident, name, server = highlight_fields(entry, 'shell')
        assert ident == SHELL_LINK
        assert name == '#yellow#Shell#Link'
        assert server == '#yellow#shell#32.dll'
