"""Unit tests for textpager.pager.pager — page counting, header, body,
footer, rendering and sending.
"""
from __future__ import annotations

import logging
import math
from collections.abc import Callable

import pytest

from textpager.pager import (
    DEFAULT_PAGE_SIZE,
    NON_POSITIVE_PAGE_MESSAGE,
    TOO_FEW_PAGES_MESSAGE,
    CollectingSink,
    InvalidPageError,
    InvalidPagerArgumentError,
    MessageSink,
    Pager,
    PagerError,
    total_pages,
)
from textpager.text import Colour, Fragment, find_click_actions, iter_runs, literal, plain_text

PagerFactory = Callable[..., Pager[str]]


def _runs_by_text(fragment: Fragment) -> dict[str, object]:
    return {text: style for text, style in iter_runs(fragment)}


# ===========================================================================
# total_pages
# ===========================================================================


class TestTotalPages:
    @pytest.mark.parametrize(
        ("item_count", "page_size", "expected"),
        [
            (0, 10, 0),
            (1, 10, 1),
            (10, 10, 1),
            (11, 10, 2),
            (26, 10, 3),
            (5, 1, 5),
            (7, 100, 1),
        ],
    )
    def test_known_values(self, item_count: int, page_size: int, expected: int) -> None:
        assert total_pages(item_count, page_size) == expected

    def test_matches_ceiling_division(self) -> None:
        for item_count in range(0, 60):
            for page_size in range(1, 12):
                assert total_pages(item_count, page_size) == math.ceil(item_count / page_size)

    def test_property_uses_item_count(self, make_pager: PagerFactory) -> None:
        assert make_pager().total_pages == 3
        assert make_pager(page_size=26).total_pages == 1
        assert make_pager(items=[]).total_pages == 0

    def test_pages_range(self, make_pager: PagerFactory) -> None:
        assert list(make_pager().pages()) == [1, 2, 3]
        assert list(make_pager(items=[]).pages()) == []


# ===========================================================================
# Construction
# ===========================================================================


class TestPagerConstruction:
    def test_default_page_size(self, letters: list[str]) -> None:
        pager = Pager("/letters", None, letters, literal)
        assert pager.page_size == DEFAULT_PAGE_SIZE == 10

    def test_attributes(self, make_pager: PagerFactory) -> None:
        pager = make_pager(page_size=4)
        assert pager.command == "/letters"
        assert pager.header_text == "Letters"
        assert pager.page_size == 4

    @pytest.mark.parametrize("page_size", [0, -1, True, 2.5])
    def test_rejects_bad_page_size(self, letters: list[str], page_size: object) -> None:
        with pytest.raises(InvalidPagerArgumentError) as exc_info:
            Pager("/letters", None, letters, literal, page_size=page_size)  # type: ignore[arg-type]
        assert exc_info.value.argument == "page_size"

    @pytest.mark.parametrize("command", ["", "   "])
    def test_rejects_blank_command(self, letters: list[str], command: str) -> None:
        with pytest.raises(InvalidPagerArgumentError) as exc_info:
            Pager(command, None, letters, literal)
        assert exc_info.value.argument == "command"

    def test_argument_error_is_value_error(self) -> None:
        assert issubclass(InvalidPagerArgumentError, ValueError)
        assert issubclass(InvalidPagerArgumentError, PagerError)

    def test_items_are_referenced_not_copied(self, letters: list[str], make_pager: PagerFactory) -> None:
        pager = make_pager(items=letters)
        letters.extend(["AA", "AB", "AC", "AD", "AE"])
        assert pager.total_pages == 4

    def test_page_command(self, make_pager: PagerFactory) -> None:
        assert make_pager().page_command(7) == "/letters 7"

    def test_repr(self, make_pager: PagerFactory) -> None:
        assert repr(make_pager()) == (
            "Pager(command='/letters', header_text='Letters', items=26, page_size=10)"
        )


# ===========================================================================
# Header
# ===========================================================================


class TestHeader:
    def test_no_header_text_gives_none(self, make_pager: PagerFactory) -> None:
        assert make_pager(header_text=None).header() is None

    def test_empty_header_text_gives_none(self, make_pager: PagerFactory) -> None:
        assert make_pager(header_text="").header() is None

    def test_odd_length_gets_trailing_space(self, make_pager: PagerFactory) -> None:
        header = make_pager(header_text="Players").header()
        assert header is not None
        # footer width 39, header length 2 + 7 + 1 = 10, padding 14
        assert plain_text(header) == "=" * 14 + "[Players ]" + "=" * 14

    def test_even_length_is_unchanged(self, make_pager: PagerFactory) -> None:
        header = make_pager(header_text="Team").header()
        assert header is not None
        assert plain_text(header) == "=" * 16 + "[Team]" + "=" * 16

    def test_padding_grows_with_page_digits(self) -> None:
        pager = Pager("/n", "Team", list(range(100)), lambda n: literal(str(n)), page_size=1)
        header = pager.header()
        assert header is not None
        # 100 pages: footer width 37 + 6 = 43, padding (43 - 6) // 2 = 18
        assert plain_text(header) == "=" * 18 + "[Team]" + "=" * 18

    def test_short_padding_is_dropped(self, make_pager: PagerFactory) -> None:
        text = "x" * 34
        header = make_pager(header_text=text).header()
        assert header is not None
        assert plain_text(header) == f"[{text}]"

    def test_padding_of_three_is_kept(self, make_pager: PagerFactory) -> None:
        # header length 32, padding (39 - 32) // 2 = 3
        text = "x" * 30
        header = make_pager(header_text=text).header()
        assert header is not None
        assert plain_text(header) == f"===[{text}]==="

    def test_header_colours(self, make_pager: PagerFactory) -> None:
        header = make_pager(header_text="Team").header()
        assert header is not None
        runs = list(iter_runs(header))
        assert [style.colour for _, style in runs] == [Colour.INFO, Colour.HEADING, Colour.INFO]
        assert runs[1][0] == "Team"


# ===========================================================================
# Body
# ===========================================================================


class TestBody:
    def test_first_page(self, make_pager: PagerFactory) -> None:
        assert plain_text(make_pager().body(1)) == "\n".join("ABCDEFGHIJ")

    def test_last_partial_page(self, make_pager: PagerFactory) -> None:
        assert plain_text(make_pager().body(3)) == "\n".join("UVWXYZ")

    def test_item_count_per_page(self, letters: list[str], make_pager: PagerFactory) -> None:
        for page_size in (1, 3, 7, 10, 26, 30):
            pager = make_pager(page_size=page_size)
            for page in pager.pages():
                lines = plain_text(pager.body(page)).split("\n")
                expected = min(page_size, len(letters) - (page - 1) * page_size)
                assert len(lines) == expected

    def test_items_keep_collection_order(self, letters: list[str], make_pager: PagerFactory) -> None:
        pager = make_pager(page_size=4)
        collected: list[str] = []
        for page in pager.pages():
            collected.extend(plain_text(pager.body(page)).split("\n"))
        assert collected == letters

    def test_page_past_end_is_empty(self, make_pager: PagerFactory) -> None:
        assert plain_text(make_pager().body(9)) == ""

    def test_page_below_one_raises(self, make_pager: PagerFactory) -> None:
        with pytest.raises(InvalidPageError) as exc_info:
            make_pager().body(0)
        assert exc_info.value.page == 0

    def test_transformer_called_only_for_page_items(self, letters: list[str]) -> None:
        seen: list[str] = []

        def transformer(letter: str) -> Fragment:
            seen.append(letter)
            return literal(letter)

        Pager("/letters", None, letters, transformer).body(2)
        assert seen == list("KLMNOPQRST")

    def test_works_with_non_indexable_collections(self) -> None:
        pager = Pager("/keys", None, {"a": 1, "b": 2, "c": 3}.keys(), literal, page_size=2)
        assert plain_text(pager.body(2)) == "c"


# ===========================================================================
# Footer
# ===========================================================================


class TestFooter:
    def test_first_page_text(self, make_pager: PagerFactory) -> None:
        assert plain_text(make_pager().footer(1)) == "============[«< (1/3) > » ]============"

    def test_width_matches_header_alignment(self) -> None:
        for count in (5, 50, 500, 5000):
            pager = Pager("/n", None, list(range(count)), lambda n: literal(str(n)), page_size=1)
            digits = len(str(count))
            for page in (1, count // 2 or 1, count):
                assert len(plain_text(pager.footer(page))) == 37 + 2 * digits

    def test_indicator_is_left_padded(self) -> None:
        pager = Pager("/n", None, list(range(120)), lambda n: literal(str(n)), page_size=10)
        assert "( 3/12)" in plain_text(pager.footer(3))
        assert "(12/12)" in plain_text(pager.footer(12))

    def test_indicator_style(self, make_pager: PagerFactory) -> None:
        runs = _runs_by_text(make_pager().footer(2))
        assert runs["(2/3)"].colour is Colour.HEADING  # type: ignore[attr-defined]

    def test_first_page_disables_first_and_previous(self, make_pager: PagerFactory) -> None:
        footer = make_pager().footer(1)
        runs = _runs_by_text(footer)
        for label in ("«", "< "):
            assert runs[label].colour is Colour.DISABLED  # type: ignore[attr-defined]
            assert runs[label].click is None  # type: ignore[attr-defined]
            assert runs[label].hover is None  # type: ignore[attr-defined]
        assert find_click_actions(footer) == ["/letters 2", "/letters 3"]

    def test_middle_page_enables_everything(self, make_pager: PagerFactory) -> None:
        footer = make_pager().footer(2)
        assert find_click_actions(footer) == [
            "/letters 1",
            "/letters 1",
            "/letters 3",
            "/letters 3",
        ]

    def test_last_page_disables_next_and_last(self, make_pager: PagerFactory) -> None:
        footer = make_pager().footer(3)
        runs = _runs_by_text(footer)
        for label in (" > ", "» "):
            assert runs[label].colour is Colour.DISABLED  # type: ignore[attr-defined]
            assert runs[label].click is None  # type: ignore[attr-defined]
        assert find_click_actions(footer) == ["/letters 1", "/letters 2"]

    def test_single_page_disables_all_buttons(self, make_pager: PagerFactory) -> None:
        footer = make_pager(items=["A", "B"]).footer(1)
        assert find_click_actions(footer) == []
        runs = _runs_by_text(footer)
        for label in ("«", "< ", " > ", "» "):
            assert runs[label].colour is Colour.DISABLED  # type: ignore[attr-defined]

    def test_enabled_buttons_have_hover_text(self, make_pager: PagerFactory) -> None:
        runs = _runs_by_text(make_pager().footer(2))
        hovers = {label: plain_text(runs[label].hover) for label in ("«", "< ", " > ", "» ")}  # type: ignore[attr-defined]
        assert hovers == {
            "«": "First Page",
            "< ": "Previous Page",
            " > ": "Next Page",
            "» ": "Last Page",
        }
        assert runs["«"].colour is Colour.COMMAND  # type: ignore[attr-defined]

    def test_brackets_are_info_coloured(self, make_pager: PagerFactory) -> None:
        runs = _runs_by_text(make_pager().footer(1))
        assert runs["============["].colour is Colour.INFO  # type: ignore[attr-defined]
        assert runs["]============"].colour is Colour.INFO  # type: ignore[attr-defined]


# ===========================================================================
# render_page
# ===========================================================================


class TestRenderPage:
    def test_composes_header_body_footer(self, make_pager: PagerFactory) -> None:
        pager = make_pager()
        header = pager.header()
        assert header is not None
        expected = "\n".join(
            [plain_text(header), plain_text(pager.body(2)), plain_text(pager.footer(2))]
        )
        assert plain_text(pager.render_page(2)) == expected

    def test_without_header_starts_with_body(self, make_pager: PagerFactory) -> None:
        text = plain_text(make_pager(header_text=None).render_page(1))
        assert text.startswith("A\nB\n")
        assert text.endswith("]============")

    def test_is_idempotent(self, make_pager: PagerFactory) -> None:
        pager = make_pager()
        assert pager.render_page(2) == pager.render_page(2)

    def test_page_past_end_renders_empty_body(self, make_pager: PagerFactory) -> None:
        pager = make_pager(header_text=None)
        assert plain_text(pager.render_page(5)) == "\n" + plain_text(pager.footer(5))
        assert "(5/3)" in plain_text(pager.render_page(5))

    def test_example_pages(self, make_pager: PagerFactory) -> None:
        pager = make_pager(header_text=None)
        page_three = pager.render_page(3)
        assert plain_text(page_three).split("\n")[:6] == list("UVWXYZ")
        assert find_click_actions(page_three) == ["/letters 1", "/letters 2"]

    def test_transformer_errors_propagate(self, letters: list[str]) -> None:
        def broken(letter: str) -> Fragment:
            raise RuntimeError(f"cannot show {letter}")

        pager = Pager("/letters", None, letters, broken)
        with pytest.raises(RuntimeError, match="cannot show A"):
            pager.render_page(1)


# ===========================================================================
# send_page
# ===========================================================================


class TestSendPage:
    def test_delivers_rendered_page(self, make_pager: PagerFactory) -> None:
        pager = make_pager()
        sink = CollectingSink()
        assert pager.send_page(2, sink) is True
        assert sink.delivered == [pager.render_page(2)]

    def test_page_past_end_delivers_one_error(self, make_pager: PagerFactory) -> None:
        sink = CollectingSink()
        assert make_pager().send_page(4, sink) is False
        assert len(sink.delivered) == 1
        runs = list(iter_runs(sink.delivered[0]))
        assert runs == [(TOO_FEW_PAGES_MESSAGE, runs[0][1])]
        assert runs[0][1].colour is Colour.ERROR

    def test_empty_collection_has_no_pages(self, make_pager: PagerFactory) -> None:
        sink = CollectingSink()
        assert make_pager(items=[]).send_page(1, sink) is False
        assert [plain_text(d) for d in sink.delivered] == [TOO_FEW_PAGES_MESSAGE]

    @pytest.mark.parametrize("page", [0, -3])
    def test_non_positive_page_delivers_error(self, make_pager: PagerFactory, page: int) -> None:
        sink = CollectingSink()
        assert make_pager().send_page(page, sink) is False
        assert [plain_text(d) for d in sink.delivered] == [NON_POSITIVE_PAGE_MESSAGE]

    def test_transformer_error_delivers_nothing(self, letters: list[str]) -> None:
        def broken(letter: str) -> Fragment:
            raise ValueError(letter)

        sink = CollectingSink()
        with pytest.raises(ValueError):
            Pager("/letters", None, letters, broken).send_page(1, sink)
        assert sink.delivered == []

    def test_rejection_is_logged(
        self, make_pager: PagerFactory, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="textpager.pager.pager"):
            make_pager().send_page(9, CollectingSink())
        assert "Rejected page 9" in caplog.text

    def test_collecting_sink_satisfies_protocol(self) -> None:
        assert isinstance(CollectingSink(), MessageSink)
