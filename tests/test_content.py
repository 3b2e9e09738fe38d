"""Tests for ContentRepository and slugify."""

import pytest

from fitcms_core.config import ContentConfig
from fitcms_core.content import ContentRepository, slugify
from fitcms_core.convert import to_mapping
from fitcms_core.errors import ConflictError, ContentNotFoundError, ContentValidationError
from fitcms_core.store import MemoryStore, content_sha
from fitcms_core.values import VList, VMapping, VScalar


ABOUT_YML = (
    'name: "Sam"\n'
    "stats:\n"
    '  - number: "500"\n'
    '    label: "Workouts"\n'
)


@pytest.fixture
def store():
    return MemoryStore()


@pytest.fixture
def repo(store):
    return ContentRepository(store)


def add_post(store, slug, title, date=None, body="Body"):
    meta = f'title: "{title}"\n'
    if date:
        meta += f'date: "{date}"\n'
    store.files[f"content/blog/{slug}.md"] = f"---\n{meta}---\n\n{body}"


# ---------------------------------------------------------------------------
# slugify
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("title, slug", [
    ("My First 5K!", "my-first-5k"),
    ("Hello, World", "hello-world"),
    ("  --Leg Day 2--  ", "leg-day-2"),
    ("Ünïcode run", "n-code-run"),
    ("!!!", ""),
])
def test_slugify(title, slug):
    assert slugify(title) == slug


# ---------------------------------------------------------------------------
# Sections
# ---------------------------------------------------------------------------

def test_types(repo):
    assert repo.types() == ["about", "quotes", "workouts", "site", "blog"]

def test_get_section(repo, store):
    store.files["content/about.yml"] = ABOUT_YML
    data, sha = repo.get_section("about")
    assert data.entries["name"] == VScalar("Sam")
    assert data.entries["stats"] == VList([
        VMapping({"number": VScalar("500"), "label": VScalar("Workouts")}),
    ])
    assert sha == content_sha(ABOUT_YML)

def test_get_unknown_section(repo):
    with pytest.raises(ContentNotFoundError):
        repo.get_section("gallery")

def test_get_missing_section_file(repo):
    with pytest.raises(ContentNotFoundError):
        repo.get_section("quotes")

def test_put_section(repo, store):
    store.files["content/about.yml"] = ABOUT_YML
    data, sha = repo.get_section("about")
    data.entries["name"] = VScalar("Sam B.")
    new_sha = repo.put_section("about", data, sha)

    assert store.files["content/about.yml"].startswith('name: "Sam B."\n')
    assert new_sha == content_sha(store.files["content/about.yml"])
    assert store.commits[-1].message == "Update about via admin panel"

def test_put_section_with_stale_sha(repo, store):
    store.files["content/site.yml"] = 'title: "a"\n'
    _, sha = repo.get_section("site")
    repo.put_section("site", to_mapping({"title": "b"}), sha)
    with pytest.raises(ConflictError):
        repo.put_section("site", to_mapping({"title": "c"}), sha)

def test_put_unknown_section(repo):
    with pytest.raises(ContentNotFoundError):
        repo.put_section("gallery", VMapping())

def test_custom_config(store):
    config = ContentConfig(sections={"home": "data/home.yml"}, blog_dir="data/posts")
    repo = ContentRepository(store, config)
    repo.put_section("home", to_mapping({"hero": "Lift"}))
    assert store.files["data/home.yml"] == 'hero: "Lift"\n'
    assert repo.types() == ["home", "blog"]


# ---------------------------------------------------------------------------
# Blog posts
# ---------------------------------------------------------------------------

def test_create_post(repo, store):
    meta = to_mapping({"title": "My First 5K!", "date": "2024-03-01"})
    slug = repo.create_post(meta, "Ran it.")

    assert slug == "my-first-5k"
    assert store.files["content/blog/my-first-5k.md"] == (
        '---\ntitle: "My First 5K!"\ndate: "2024-03-01"\n---\n\nRan it.'
    )
    assert store.commits[-1].message == "Add new blog post: My First 5K!"

def test_create_post_requires_title(repo):
    with pytest.raises(ContentValidationError):
        repo.create_post(to_mapping({"date": "2024-03-01"}))
    with pytest.raises(ContentValidationError):
        repo.create_post(to_mapping({"title": "   "}))

def test_create_post_title_without_slug_characters(repo):
    with pytest.raises(ContentValidationError):
        repo.create_post(to_mapping({"title": "!!!"}))

def test_create_existing_post_conflicts(repo):
    repo.create_post(to_mapping({"title": "Rest Day"}))
    with pytest.raises(ConflictError):
        repo.create_post(to_mapping({"title": "Rest day"}))

def test_get_post(repo, store):
    add_post(store, "hills", "Hills", "2024-02-01", "Up and down.")
    post = repo.get_post("hills")
    assert post.slug == "hills"
    assert post.sha == content_sha(store.files["content/blog/hills.md"])
    assert post.metadata.text("title") == "Hills"
    assert post.body == "Up and down."

def test_get_missing_post(repo):
    with pytest.raises(ContentNotFoundError):
        repo.get_post("nope")

def test_list_posts_newest_first(repo, store):
    add_post(store, "old", "Old", "2024-01-01")
    add_post(store, "undated", "Undated")
    add_post(store, "new", "New", "2024-06-01")
    add_post(store, "garbled", "Garbled", "someday")
    store.files["content/blog/README.txt"] = "not a post"
    store.files["content/blog/drafts/wip.md"] = "---\ntitle: WIP\n---\n"

    slugs = [p.slug for p in repo.list_posts()]
    assert slugs[:2] == ["new", "old"]
    assert sorted(slugs[2:]) == ["garbled", "undated"]

def test_list_posts_empty(repo):
    assert repo.list_posts() == []

def test_update_post(repo, store):
    add_post(store, "hills", "Hills")
    post = repo.get_post("hills")
    post.metadata.entries["title"] = VScalar("Hill Repeats")
    repo.update_post("hills", post.metadata, "New body", post.sha)

    assert repo.get_post("hills").body == "New body"
    assert store.commits[-1].message == "Update blog post: Hill Repeats"

def test_update_post_without_title_uses_slug(repo, store):
    add_post(store, "hills", "Hills")
    sha = repo.get_post("hills").sha
    repo.update_post("hills", VMapping(), "x", sha)
    assert store.commits[-1].message == "Update blog post: hills"

def test_update_post_stale_sha(repo, store):
    add_post(store, "hills", "Hills")
    sha = repo.get_post("hills").sha
    repo.update_post("hills", to_mapping({"title": "A"}), "a", sha)
    with pytest.raises(ConflictError):
        repo.update_post("hills", to_mapping({"title": "B"}), "b", sha)

def test_list_posts_utc_suffix_and_offsets(repo, store):
    add_post(store, "zulu", "Zulu", "2024-03-01T10:00:00Z")
    add_post(store, "offset", "Offset", "2024-03-01T12:30:00+02:00")
    add_post(store, "plain", "Plain", "2024-02-01")
    add_post(store, "undated", "Undated")

    slugs = [p.slug for p in repo.list_posts()]
    assert slugs == ["offset", "zulu", "plain", "undated"]
