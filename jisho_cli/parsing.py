"""
Search-results parser

Turns the HTML of a jisho.org search page into a list of :class:`Entry`
objects. Each ``.concept_light`` block becomes one entry:

- the headword comes from ``.concept_light-representation .text``
- the reading is rebuilt from the headword and its ``.furigana`` slots
- items come from the children of ``.meanings-wrapper``

Any missing required anchor raises :class:`StructureError` and the whole page
is rejected.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple
from urllib.parse import urljoin

from bs4 import BeautifulSoup, Comment, NavigableString
from bs4 import Tag as HtmlElement

from .errors import StructureError, StructureProblem
from .models import (
    Entry,
    Meaning,
    ResultItem,
    SeeAlso,
    SupplementalInfo,
    Tag,
    TextUnit,
    UnitKind,
)

logger = logging.getLogger(__name__)

BLOCK_SELECTOR = "#primary .concept_light"
REPRESENTATION_SELECTOR = ".concept_light-representation"
HEADWORD_SELECTOR = ".text"
FURIGANA_SELECTOR = ".furigana"
MEANINGS_SELECTOR = ".meanings-wrapper"

TAGS_CLASS = "meaning-tags"
MEANING_TEXT_SELECTOR = ".meaning-meaning"
NUMBER_SELECTOR = ".meaning-definition-section_divider"
SUPPLEMENTAL_SELECTOR = ".supplemental_info"
SENSE_TAG_SELECTOR = ".sense-tag"
SENSE_TAG_CLASS = "tag-tag"
SEE_ALSO_CLASS = "tag-see_also"


def _classes(element: HtmlElement) -> List[str]:
    return element.get("class") or []


def _text(element: HtmlElement) -> str:
    return element.get_text().strip()


# ---------------------------------------------------------------------------
# Block extraction


def extract_blocks(soup: BeautifulSoup) -> List[HtmlElement]:
    """Return every entry block on the page, in document order."""
    return soup.select(BLOCK_SELECTOR)


def find_representation(block: HtmlElement) -> HtmlElement:
    representation = block.select_one(REPRESENTATION_SELECTOR)
    if representation is None:
        raise StructureError(StructureProblem.MISSING_REPRESENTATION)
    return representation


def _require(parent: HtmlElement, selector: str, problem: StructureProblem) -> HtmlElement:
    element = parent.select_one(selector)
    if element is None:
        raise StructureError(problem)
    return element


# ---------------------------------------------------------------------------
# Reading reconstruction


def classify_text_units(headword: HtmlElement) -> List[TextUnit]:
    """Split a headword into its visual slots.

    Kanji sit in bare text nodes, possibly several in a row, so each character
    of a text node is its own slot. Kana are wrapped in elements and an
    element is always a single slot, however many characters it holds.
    """
    units: List[TextUnit] = []
    for node in headword.children:
        if isinstance(node, Comment):
            continue
        if isinstance(node, HtmlElement):
            text = _text(node)
            if text:
                units.append(TextUnit(text, UnitKind.KANA))
        elif isinstance(node, NavigableString):
            units.extend(TextUnit(char, UnitKind.KANJI) for char in node.strip())
    return units


def extract_furigana(furigana: HtmlElement) -> List[str]:
    """Return the furigana slots of a headword.

    The site either emits one element per slot or, for some compounds, a
    single ``<ruby>`` whose ``<rt>`` holds one character per slot.
    """
    if furigana.find("ruby") is None:
        return [_text(child) for child in furigana.find_all(recursive=False)]

    rt = furigana.find("rt")
    if rt is None:
        logger.debug("Ruby furigana without <rt>: %s", furigana)
        return []
    return list(_text(rt))


def merge_reading(units: Sequence[TextUnit], slots: Sequence[str]) -> str:
    parts: List[str] = []
    for index, slot in enumerate(slots):
        if slot:
            parts.append(slot)
        elif index < len(units) and units[index].kind is UnitKind.KANA:
            parts.append(units[index].text)
        # An empty slot over a kanji belongs to a run whose reading was
        # already emitted by an earlier slot.
    return "".join(parts)


def reconstruct_reading(representation: HtmlElement) -> str:
    headword = _require(representation, HEADWORD_SELECTOR, StructureProblem.MISSING_HEADWORD)
    furigana = _require(representation, FURIGANA_SELECTOR, StructureProblem.MISSING_FURIGANA)
    return merge_reading(classify_text_units(headword), extract_furigana(furigana))


# ---------------------------------------------------------------------------
# Items


def _parse_sense_tag(element: HtmlElement, base_url: Optional[str]) -> Optional[SupplementalInfo]:
    classes = _classes(element)
    if SENSE_TAG_CLASS in classes:
        return Tag(_text(element))

    if SEE_ALSO_CLASS in classes:
        link = element.find("a")
        if link is None:
            return SeeAlso(_text(element), "")
        href = link.get("href") or ""
        if href and base_url:
            href = urljoin(base_url, href)
        return SeeAlso(_text(link), href)

    logger.debug("Dropping supplemental annotation with classes %s", classes)
    return None


def parse_supplemental_info(
    element: HtmlElement, base_url: Optional[str] = None
) -> Tuple[SupplementalInfo, ...]:
    container = element.select_one(SUPPLEMENTAL_SELECTOR)
    if container is None:
        return ()

    infos = (_parse_sense_tag(tag, base_url) for tag in container.select(SENSE_TAG_SELECTOR))
    return tuple(info for info in infos if info is not None)


def parse_item(element: HtmlElement, base_url: Optional[str] = None) -> ResultItem:
    """Classify one child of the meanings container."""
    if TAGS_CLASS in _classes(element):
        return Tag(_text(element))

    meaning_element = element.select_one(MEANING_TEXT_SELECTOR)
    text = _text(meaning_element if meaning_element is not None else element)

    number_element = element.select_one(NUMBER_SELECTOR)
    number = _text(number_element) if number_element is not None else None

    return Meaning(
        text=text,
        number=number,
        supplemental_info=parse_supplemental_info(element, base_url),
    )


def parse_items(block: HtmlElement, base_url: Optional[str] = None) -> Tuple[ResultItem, ...]:
    meanings = _require(block, MEANINGS_SELECTOR, StructureProblem.MISSING_MEANINGS)
    return tuple(parse_item(child, base_url) for child in meanings.find_all(recursive=False))


# ---------------------------------------------------------------------------
# Assembly


def parse_block(block: HtmlElement, base_url: Optional[str] = None) -> Entry:
    representation = find_representation(block)
    headword = _require(representation, HEADWORD_SELECTOR, StructureProblem.MISSING_HEADWORD)
    return Entry(
        text=_text(headword),
        reading=reconstruct_reading(representation),
        items=parse_items(block, base_url),
    )


def parse(html: str, base_url: Optional[str] = None) -> List[Entry]:
    """Parse a search-results page into entries.

    ``base_url`` is used to resolve relative cross-reference links; without
    it hrefs are returned as written in the page.
    """
    soup = BeautifulSoup(html, "html.parser")
    blocks = extract_blocks(soup)
    logger.debug("Found %d entry blocks", len(blocks))
    return [parse_block(block, base_url) for block in blocks]


class JishoParser:
    """Parser bound to the site the page was fetched from."""

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url

    def parse(self, html: str) -> List[Entry]:
        return parse(html, base_url=self.base_url)
