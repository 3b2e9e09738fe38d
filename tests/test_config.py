"""Tests for ContentConfig."""

from fitcms_core.config import ContentConfig


def test_defaults():
    config = ContentConfig()
    assert config.sections == {
        "about": "content/about.yml",
        "quotes": "content/quotes.yml",
        "workouts": "content/workouts.yml",
        "site": "content/site.yml",
    }
    assert config.blog_dir == "content/blog"

def test_paths():
    config = ContentConfig()
    assert config.section_path("site") == "content/site.yml"
    assert config.section_path("nope") is None
    assert config.post_path("hills") == "content/blog/hills.md"

def test_from_env_empty():
    assert ContentConfig.from_env({}) == ContentConfig()

def test_from_env_content_dir():
    config = ContentConfig.from_env({"FITCMS_CONTENT_DIR": "site/content/"})
    assert config.sections["about"] == "site/content/about.yml"
    assert config.blog_dir == "site/content/blog"

def test_from_env_blog_dir():
    config = ContentConfig.from_env({"FITCMS_BLOG_DIR": "posts"})
    assert config.sections["site"] == "content/site.yml"
    assert config.post_path("x") == "posts/x.md"
