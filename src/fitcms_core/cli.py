"""``fitcms`` command line: inspect and normalise content files.

Usage::

    fitcms parse content/about.yml
    fitcms split content/blog/first-post.md --json
    fitcms format content/site.yml --write
    fitcms posts path/to/site-checkout
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click

from .config import ContentConfig
from .content import ContentRepository
from .convert import to_python
from .errors import FitCMSError
from .frontmatter import DELIMITER, compose, has_frontmatter, split
from .reader import parse
from .store import DirectoryStore
from .values import Value, VList, VMapping, VScalar, _Empty
from .writer import serialize

MARKDOWN_SUFFIXES = (".md", ".markdown")


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def _fmt_inline(value: Value) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, VScalar):
        return '"' + value.value.replace("\n", "\\n") + '"'
    if isinstance(value, VList):
        return "[" + ", ".join(_fmt_inline(v) for v in value.items) + "]"
    if isinstance(value, VMapping):
        return "{" + ", ".join(f"{k}: {_fmt_inline(v)}" for k, v in value.entries.items()) + "}"
    if isinstance(value, _Empty):
        return "Empty"
    return repr(value)


def _fmt_inspect(value: Value) -> str:
    """Pretty-print a value tree one entry per line."""
    if isinstance(value, VMapping):
        if not value.entries:
            return "VMapping {}"
        width = max(len(k) for k in value.entries)
        lines = ["VMapping {"]
        for k, v in value.entries.items():
            lines.append(f"  {k:<{width}}: {_fmt_inline(v)}")
        lines.append("}")
        return "\n".join(lines)

    if isinstance(value, VList):
        lines = ["VList ["]
        for i, v in enumerate(value.items, 1):
            lines.append(f"  {i}: {_fmt_inline(v)}")
        lines.append("]")
        return "\n".join(lines)

    return _fmt_inline(value)


def _is_markdown(path: Path) -> bool:
    return path.suffix.lower() in MARKDOWN_SUFFIXES


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def normalize_text(text: str, markdown: bool) -> str:
    """Rewrite *text* in the canonical form the admin panel writes."""
    if not markdown:
        return serialize(parse(text))
    if not has_frontmatter(text):
        return text
    doc = split(text)
    return compose(doc.metadata, doc.body)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log parser decisions")
def cli(verbose: bool) -> None:
    """Inspect and normalise fitness-blog content files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@cli.command("parse")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print the tree as JSON")
def parse_cmd(path: Path, as_json: bool) -> None:
    """Parse a YAML content file and print its value tree."""
    tree = parse(_read(path))
    if as_json:
        click.echo(json.dumps(to_python(tree), indent=2, ensure_ascii=False))
    else:
        click.echo(_fmt_inspect(tree))


@cli.command("split")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Print metadata and body as JSON")
def split_cmd(path: Path, as_json: bool) -> None:
    """Split a Markdown post into frontmatter metadata and body."""
    doc = split(_read(path))
    if as_json:
        payload = {"data": to_python(doc.metadata), "content": doc.body}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    click.echo(_fmt_inspect(doc.metadata))
    click.echo(DELIMITER)
    click.echo(doc.body)


@cli.command("format")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("-w", "--write", is_flag=True, help="Rewrite the file in place")
def format_cmd(path: Path, write: bool) -> None:
    """Rewrite a content file in canonical form."""
    original = _read(path)
    formatted = normalize_text(original, _is_markdown(path))
    if not write:
        click.echo(formatted, nl=False)
        return
    if formatted != original:
        path.write_text(formatted, encoding="utf-8")
        click.echo(f"reformatted {path}")
    else:
        click.echo(f"unchanged {path}")


@cli.command("posts")
@click.argument("root", type=click.Path(exists=True, file_okay=False, path_type=Path))
def posts_cmd(root: Path) -> None:
    """List the blog posts of a site checkout, newest first."""
    repo = ContentRepository(DirectoryStore(root), ContentConfig.from_env())
    try:
        posts = repo.list_posts()
    except FitCMSError as exc:
        raise click.ClickException(str(exc)) from exc

    if not posts:
        click.echo("  (no posts)")
        return
    width = max(len(p.slug) for p in posts)
    for post in posts:
        date = post.document.date or "-"
        click.echo(f"{date:<10}  {post.slug:<{width}}  {post.document.title}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
