"""Unit tests for the domain entities."""

import pytest

from manga_details.core import (
    AUTHOR,
    COVER_ART,
    CoverAsset,
    DetailView,
    FeedEntry,
    ItemRecord,
    LibraryEntry,
    Relationship,
)


def make_view(**overrides):
    fields = dict(
        item_id="abc",
        title="Berserk",
        alt_title="No alt title available",
        description="A dark tale.",
        genres="Action",
        year="1989",
        status="ongoing",
        cover_url="https://uploads.mangadex.org/covers/abc/x.jpg",
        author_name="Kentaro Miura",
        chapters=(FeedEntry(id="c2", chapter="2"), FeedEntry(id="c1", chapter="1")),
        is_saved=False,
    )
    fields.update(overrides)
    return DetailView(**fields)


def test_first_relationship_returns_first_of_type():
    item = ItemRecord(
        id="abc",
        relationships=(
            Relationship(type=AUTHOR, id="auth1"),
            Relationship(type=COVER_ART, id="cov1"),
            Relationship(type=AUTHOR, id="auth2"),
        ),
    )
    assert item.first_relationship(AUTHOR).id == "auth1"
    assert item.first_relationship(COVER_ART).id == "cov1"
    assert item.first_relationship("artist") is None


def test_cover_url_composition():
    cover = CoverAsset(file_name="x.jpg")
    assert cover.url_for("https://uploads.mangadex.org/", "abc") == "https://uploads.mangadex.org/covers/abc/x.jpg"


class TestFeedEntry:
    def test_display_label_with_title(self):
        assert FeedEntry(id="1", chapter="10", title="The Hawk").display_label == "Chapter 10 The Hawk"

    def test_display_label_without_title_or_number(self):
        assert FeedEntry(id="1", chapter="10").display_label == "Chapter 10"
        assert FeedEntry(id="1").display_label == "Chapter"

    def test_link_path(self):
        assert FeedEntry(id="c-1").link_path == "/chapter/c-1"


class TestDetailView:
    def test_is_immutable(self):
        view = make_view()
        with pytest.raises(AttributeError):
            view.title = "Other"

    def test_has_alt_title(self):
        assert make_view().has_alt_title is False
        assert make_view(alt_title="The Black Swordsman").has_alt_title is True

    def test_to_library_entry(self):
        entry = make_view().to_library_entry()
        assert entry == LibraryEntry(
            id="abc",
            title="Berserk",
            cover_image_url="https://uploads.mangadex.org/covers/abc/x.jpg",
            chapter_count=2,
        )


class TestLibraryEntrySerialization:
    def test_persisted_layout(self):
        entry = LibraryEntry(id="abc", title="Berserk", cover_image_url=None, chapter_count=3)
        assert entry.to_dict() == {
            "id": "abc",
            "title": "Berserk",
            "coverImageUrl": None,
            "chapterCount": 3,
        }
        assert LibraryEntry.from_dict(entry.to_dict()) == entry

    def test_from_dict_tolerates_missing_optional_fields(self):
        entry = LibraryEntry.from_dict({"id": "abc"})
        assert entry.title == ""
        assert entry.cover_image_url is None
        assert entry.chapter_count == 0

    @pytest.mark.parametrize(
        "data",
        [{}, {"id": ""}, {"id": 5}, {"id": "abc", "chapterCount": "many"}, "abc", None],
    )
    def test_from_dict_rejects_malformed(self, data):
        with pytest.raises(ValueError):
            LibraryEntry.from_dict(data)
