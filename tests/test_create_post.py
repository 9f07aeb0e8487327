import json
from datetime import date
from pathlib import Path

import frontmatter
import pytest

from blogsmith.errors import CollisionError, NotInProjectError, ParseError, UsageError
from blogsmith.posts import create_post


def _snapshot(root: Path) -> list[str]:
    return sorted(str(path.relative_to(root)) for path in root.rglob("*"))


def test_creates_dated_post(blog_site: Path) -> None:
    post_file = create_post("My First Post", date=date(2020, 9, 12))

    expected = blog_site.resolve() / "_posts" / "2020-09-12-my-first-post" / "my-first-post.Rmd"
    assert post_file == expected
    post = frontmatter.load(str(post_file))
    assert post["title"] == "My First Post"
    assert post["date"] == "09-12-2020"
    assert post["author"] == [{"name": "Test Author"}]
    assert post["output"] == {"distill::distill_article": {"self_contained": False}}
    assert "draft" not in post.metadata
    assert "Distill is a publication format" in post.content


def test_default_prefix_is_today(blog_site: Path) -> None:
    post_file = create_post("Today")
    assert post_file.parent.name == f"{date.today():%Y-%m-%d}-today"


def test_without_prefix_and_explicit_slug(blog_site: Path) -> None:
    post_file = create_post("Whatever", slug="Custom Slug", date_prefix=None)
    assert post_file == blog_site.resolve() / "_posts" / "custom-slug" / "custom-slug.Rmd"


def test_explicit_prefix_differs_from_post_date(blog_site: Path) -> None:
    post_file = create_post("Backdated", date=date(2021, 1, 1), date_prefix="9/15/2020")
    assert post_file.parent.name == "2020-09-15-backdated"
    assert frontmatter.load(str(post_file))["date"] == "01-01-2021"


def test_draft_and_quoted_title(blog_site: Path) -> None:
    post_file = create_post('Say "hello": a draft', draft=True, date_prefix=None)
    post = frontmatter.load(str(post_file))
    assert post["title"] == 'Say "hello": a draft'
    assert post["draft"] is True


def test_explicit_author(blog_site: Path) -> None:
    post_file = create_post("Guest", author="Jane Doe", date_prefix=None)
    assert frontmatter.load(str(post_file))["author"] == [{"name": "Jane Doe"}]


def test_author_from_posts_index(blog_site: Path) -> None:
    index = blog_site / "_site" / "posts" / "posts.json"
    index.parent.mkdir(parents=True)
    index.write_text(
        json.dumps([
            {"title": "Newest", "author": [{"name": "Previous Author", "url": "https://example.com"}]},
            {"title": "Older", "author": [{"name": "Someone Else"}]},
        ]),
        encoding="utf-8",
    )
    post_file = create_post("Follow Up", date_prefix=None)
    assert frontmatter.load(str(post_file))["author"] == [
        {"name": "Previous Author", "url": "https://example.com"}
    ]


def test_works_from_nested_directory(blog_site: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    nested = blog_site / "_posts"
    monkeypatch.chdir(nested)
    post_file = create_post("Nested", date_prefix=None)
    assert post_file.parent == blog_site.resolve() / "_posts" / "nested"


def test_collision_raises_without_mutation(blog_site: Path) -> None:
    existing = blog_site / "_posts" / "2020-09-12-taken"
    existing.mkdir()
    (existing / "keep.txt").write_text("original", encoding="utf-8")
    before = _snapshot(blog_site)

    with pytest.raises(CollisionError) as exc:
        create_post("Taken", date=date(2020, 9, 12))

    assert "already exists" in str(exc.value)
    assert _snapshot(blog_site) == before
    assert (existing / "keep.txt").read_text(encoding="utf-8") == "original"


def test_outside_site_raises(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.chdir(tmp_path)
    with pytest.raises(NotInProjectError):
        create_post("Lost")
    assert list(tmp_path.iterdir()) == []


def test_empty_slug_raises(blog_site: Path) -> None:
    with pytest.raises(UsageError):
        create_post("!!!")


def test_invalid_prefix_raises(blog_site: Path) -> None:
    with pytest.raises(ParseError):
        create_post("Bad Date", date_prefix="the day after tomorrow-ish")
    assert list((blog_site / "_posts").iterdir()) == []


def test_truncated_posts_index_raises_without_mutation(blog_site: Path) -> None:
    index = blog_site / "_site" / "posts" / "posts.json"
    index.parent.mkdir(parents=True)
    index.write_text('[{"title": "Newest", "author": [{"name": "Real"}', encoding="utf-8")

    with pytest.raises(ParseError) as exc:
        create_post("After Index")
    assert "posts.json" in str(exc.value)
    assert list((blog_site / "_posts").iterdir()) == []
