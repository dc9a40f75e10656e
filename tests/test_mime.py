"""Tests for burma_static.routing.mime — lookup and per-run memoization."""

from burma_static.routing.mime import MimeInfo, MimeResolver, lookup_mime


class TestLookupMime:
    def test_known_extension(self) -> None:
        assert lookup_mime(".html") == MimeInfo(type="text/html", type_of="text")

    def test_category_is_first_segment(self) -> None:
        assert lookup_mime(".png").type_of == "image"

    def test_unknown_extension_degrades_to_empty(self) -> None:
        assert lookup_mime(".definitely-not-a-type") == MimeInfo()

    def test_empty_extension(self) -> None:
        assert lookup_mime("") == MimeInfo(type="", type_of="")


class TestMimeResolver:
    def test_one_lookup_per_extension(self) -> None:
        seen: list[str] = []

        def lookup(ext: str) -> MimeInfo:
            seen.append(ext)
            return MimeInfo(type="text/plain", type_of="text")

        resolver = MimeResolver(lookup)
        for ext in (".txt", ".txt", ".css", ".txt", ".css"):
            resolver.resolve(ext)
        assert seen == [".txt", ".css"]
        assert resolver.calls == 2

    def test_none_result_degrades(self) -> None:
        resolver = MimeResolver(lambda ext: None)
        assert resolver.resolve(".x") == MimeInfo()

    def test_mapping_result_with_missing_fields(self) -> None:
        resolver = MimeResolver(lambda ext: {"type": "text/css", "typeOf": None})
        assert resolver.resolve(".css") == MimeInfo(type="text/css", type_of="")

    def test_mapping_result_with_type_of(self) -> None:
        resolver = MimeResolver(lambda ext: {"type": "font/woff2", "type_of": "font"})
        assert resolver.resolve(".woff2") == MimeInfo(type="font/woff2", type_of="font")

    def test_separate_resolvers_do_not_share_memo(self) -> None:
        calls: list[str] = []

        def lookup(ext: str) -> MimeInfo:
            calls.append(ext)
            return MimeInfo()

        MimeResolver(lookup).resolve(".md")
        MimeResolver(lookup).resolve(".md")
        assert calls == [".md", ".md"]
