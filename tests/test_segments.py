"""Tests for segment tokenizers."""

from cv_pdf.layout.segments import (
    Bullet,
    Link,
    PlainText,
    bullet_segments,
    has_link,
    joined,
    link_segments,
)


class TestBulletSegments:
    def test_date_range(self):
        assert bullet_segments("2021 - 2024") == [
            PlainText("2021"),
            Bullet(),
            PlainText("2024"),
        ]

    def test_compound_company(self):
        assert bullet_segments("Acme Corp - Remote - Contract") == [
            PlainText("Acme Corp"),
            Bullet(),
            PlainText("Remote"),
            Bullet(),
            PlainText("Contract"),
        ]

    def test_existing_bullet_character(self):
        assert bullet_segments("2024 • Completed") == [
            PlainText("2024"),
            Bullet(),
            PlainText("Completed"),
        ]

    def test_hyphenated_word_untouched(self):
        assert bullet_segments("Rolls-Royce") == [PlainText("Rolls-Royce")]

    def test_empty(self):
        assert bullet_segments("") == []


class TestLinkSegments:
    def test_prefix_url_suffix(self):
        segments = link_segments("WES: https://wes.org/verify/123 (verified)")
        assert segments == [
            PlainText("WES: "),
            Link("https://wes.org/verify/123", "https://wes.org/verify/123"),
            PlainText(" (verified)"),
        ]
        assert has_link(segments)

    def test_multiple_urls(self):
        segments = link_segments("see http://a.example and https://b.example")
        links = [s for s in segments if isinstance(s, Link)]
        assert [link.url for link in links] == ["http://a.example", "https://b.example"]
        assert PlainText(" and ") in segments

    def test_plain_text(self):
        segments = link_segments("Graduated with honours")
        assert segments == [PlainText("Graduated with honours")]
        assert not has_link(segments)


def test_joined_interleaves_bullets():
    link = Link("Demo", "https://demo.example")
    assert joined(["GitHub", link]) == [PlainText("GitHub"), Bullet(), link]
    assert joined(["only"]) == [PlainText("only")]
