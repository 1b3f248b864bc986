"""
Best Image Selection.

Recipe pages usually offer several images: the one a site adapter or the
schema.org data points at first, further schema.org ImageObjects, and one or
more OpenGraph images. This plugin gathers them and returns the largest one.
"""
from __future__ import annotations

import functools
import logging
import re
from dataclasses import dataclass, field
from typing import Any, Iterator

from ..outcome import Outcome
from .interface import PluginInterface, Step

_LOGGER = logging.getLogger(__name__)

DIMENSION_PATTERN = re.compile(r"(?:^|[^0-9])(?P<width>\d{3,5})[xX](?P<height>\d{3,5})(?:[^0-9]|$)")
QUERY_WIDTH_PATTERN = re.compile(r"[?&](?:w|width)=(\d{3,5})", re.IGNORECASE)
QUERY_HEIGHT_PATTERN = re.compile(r"[?&](?:h|height)=(\d{3,5})", re.IGNORECASE)

OPENGRAPH_IMAGE_PROPERTIES = ("og:image", "og:image:url", "og:image:secure_url")
ABSOLUTE_URL_PREFIXES = ("http://", "https://", "//")


@dataclass
class ImageCandidate:
    url: str
    width: int | None = None
    height: int | None = None
    order: int = 0
    sources: set[str] = field(default_factory=set)


def parse_dimension(value: Any) -> int | None:
    """Read a pixel dimension from a number, a string or a QuantitativeValue."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return int(value)
    if isinstance(value, str):
        match = re.search(r"\d+", value)
        return int(match.group()) if match else None
    if isinstance(value, dict):
        for key in ("value", "maxValue", "minValue"):
            if key in value:
                parsed = parse_dimension(value[key])
                if parsed is not None:
                    return parsed
    return None


def _max_dimension(current: int | None, new: int | None) -> int | None:
    if current is None:
        return new
    if new is None:
        return current
    return max(current, new)


def _normalize_entries(entry: Any) -> Iterator[ImageCandidate]:
    if not entry:
        return
    if isinstance(entry, list):
        for item in entry:
            yield from _normalize_entries(item)
    elif isinstance(entry, dict):
        url = entry.get("url") or entry.get("@id") or entry.get("contentUrl") or entry.get("contentURL")
        if isinstance(url, list):
            url = url[0] if url else None
        if not url:
            return
        yield ImageCandidate(
            url=str(url).strip(),
            width=parse_dimension(
                entry.get("width") or entry.get("pixelWidth") or entry.get("contentWidth")
            ),
            height=parse_dimension(
                entry.get("height") or entry.get("pixelHeight") or entry.get("contentHeight")
            ),
        )
    elif isinstance(entry, str) and entry.strip():
        yield ImageCandidate(url=entry.strip())


def _merge_candidate(
    candidates: dict[str, ImageCandidate], candidate: ImageCandidate, source: str
) -> None:
    url = candidate.url.strip()
    if not url.startswith(ABSOLUTE_URL_PREFIXES):
        _LOGGER.debug("Skipping relative image candidate %s", url)
        return

    existing = candidates.get(url)
    if existing is None:
        candidates[url] = ImageCandidate(
            url=url,
            width=candidate.width,
            height=candidate.height,
            order=len(candidates),
            sources={source},
        )
        return

    existing.width = _max_dimension(existing.width, candidate.width)
    existing.height = _max_dimension(existing.height, candidate.height)
    existing.sources.add(source)


def _collect_opengraph_candidates(soup, candidates: dict[str, ImageCandidate]) -> None:
    images: dict[str, ImageCandidate] = {}
    current_url = None

    for meta in soup.find_all("meta"):
        prop = (meta.get("property") or meta.get("name") or "").lower()
        content = meta.get("content")
        if not content:
            continue

        if prop in OPENGRAPH_IMAGE_PROPERTIES:
            current_url = content.strip()
            images.setdefault(current_url, ImageCandidate(url=current_url))
            _merge_candidate(candidates, images[current_url], "opengraph")
        elif prop == "og:image:width" and current_url in images:
            images[current_url].width = parse_dimension(content)
            _merge_candidate(candidates, images[current_url], "opengraph")
        elif prop == "og:image:height" and current_url in images:
            images[current_url].height = parse_dimension(content)
            _merge_candidate(candidates, images[current_url], "opengraph")


def collect_candidates(scraper, image: Any) -> list[ImageCandidate]:
    """Gather image candidates in discovery order, merged by URL."""
    candidates: dict[str, ImageCandidate] = {}

    for candidate in _normalize_entries(image):
        _merge_candidate(candidates, candidate, "primary")

    schema_data = scraper.schema.data
    if isinstance(schema_data, dict):
        for candidate in _normalize_entries(schema_data.get("image")):
            _merge_candidate(candidates, candidate, "schema")

    _collect_opengraph_candidates(scraper.soup, candidates)
    return list(candidates.values())


def extract_dimensions_from_url(url: str) -> tuple[int, int] | None:
    """Guess image dimensions from a 'WIDTHxHEIGHT' token or query parameters."""
    match = DIMENSION_PATTERN.search(url)
    if match:
        return int(match.group("width")), int(match.group("height"))

    width_match = QUERY_WIDTH_PATTERN.search(url)
    height_match = QUERY_HEIGHT_PATTERN.search(url)
    if width_match and height_match:
        return int(width_match.group(1)), int(height_match.group(1))
    return None


def score_candidate(candidate: ImageCandidate) -> tuple[int, int, int]:
    """Score by area, then https, then earliest discovery."""
    width, height = candidate.width, candidate.height
    if not (width and height):
        dimensions = extract_dimensions_from_url(candidate.url)
        if dimensions:
            width = width if width is not None else dimensions[0]
            height = height if height is not None else dimensions[1]

    if width and height:
        area = width * height
    elif width or height:
        area = (width or height) ** 2
    else:
        area = 0

    secure = 1 if candidate.url.startswith("https://") else 0
    return area, secure, -candidate.order


def select_best_candidate(candidates: list[ImageCandidate]) -> str | None:
    if not candidates:
        return None
    return max(candidates, key=score_candidate).url


class BestImagePlugin(PluginInterface):
    run_on_hosts = ("*",)
    run_on_methods = ("image",)

    @classmethod
    def run(cls, decorated: Step) -> Step:
        @functools.wraps(decorated)
        def wrapper(scraper) -> Outcome:
            outcome = decorated(scraper)
            if not outcome.ok or not scraper.best_image_selection:
                return outcome

            candidates = collect_candidates(scraper, outcome.value)
            best = select_best_candidate(candidates)
            if not best:
                return outcome

            _LOGGER.debug(
                "Selected %s out of %d image candidates", best, len(candidates)
            )
            return Outcome.found(best)

        return wrapper
