"""Shared fixtures: a small on-disk site used by the build and CLI tests."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    from pathlib import Path

SITE_FILES: dict[str, str] = {
    "site.yaml": """
        site:
          title: Test Folio
          url: https://folio.invalid/
          author: Tester
        passthrough:
          static/robots.txt: robots.txt
          static/images: images
          vendor/missing.css: css/missing.css
        layouts:
          post: layouts/post.jinja
        """,
    "static/robots.txt": "User-agent: *\n",
    "static/images/dot.svg": "<svg/>\n",
    "src/_includes/base.jinja": """
        <!doctype html>
        <html>
        <head><title>{{ title }} | {{ site.title }}</title></head>
        <body>
        <header>{% for entry in collections.all | navigation %}<a class="menu" href="{{ entry.url }}">{{ entry.title }}</a>{% for child in entry.children %}<a class="submenu" href="{{ child.url }}">{{ child.title }}</a>{% endfor %}{% endfor %}</header>
        <nav>{% for tag in collections.tag_list %}<a class="tag" href="/tags/{{ tag | slug }}/">{{ tag }}</a>{% endfor %}</nav>
        <main>{{ content }}</main>
        <footer>{{ icon("star") }} {{ year() }}</footer>
        </body>
        </html>
        """,
    "src/_includes/layouts/post.jinja": """
        <!doctype html>
        <html>
        <head><title>{{ title }}</title><style>{{ pygments_css }}</style></head>
        <body>
        <main class="post">{{ content }}</main>
        <p class="posted">{{ page.date | post_date }}</p>
        </body>
        </html>
        """,
    "src/icons/star.svg": '<svg class="icon-star"></svg>\n',
    "src/index.html": """
        ---
        layout: base
        title: Home
        tags: [nav]
        navigation:
          key: Home
          order: 1
        ---
        <ul>
        {% for post in collections.posts %}<li><a href="{{ post.url }}">{{ post.data.title }}</a> <time>{{ post.date | html_date }}</time></li>{% endfor %}
        </ul>
        """,
    "src/posts/first-trip.md": """
        ---
        layout: post
        title: First trip
        date: 2024-03-09
        tags: [travel, post, posts]
        ---
        # Packing list

        Line one
        Line two

        More at https://example.org/trip

        ## Packing list
        """,
    "src/posts/noodles.md": """
        ---
        layout: base.jinja
        title: Noodles
        date: 2024-05-21
        tags: [food, nav, posts]
        navigation:
          key: Noodles
          parent: Home
        ---
        # My FAQ!

        <div class="accordion" id="faq">
        {% call accordion("My FAQ!", "#faq") %}<p>Broth first.</p>{% endcall %}
        </div>
        """,
    "src/drafts/_hidden.md": "# hidden\n",
    "src/feed.jinja": """
        ---
        permalink: false
        ---
        nothing
        """,
    "src/atom.jinja": """
        ---
        permalink: atom.xml
        ---
        <feed xmlns="http://www.w3.org/2005/Atom">
        <updated>{{ collections.posts | newest_date | rfc3339 }}</updated>
        {% for post in collections.posts %}
        <entry><id>{{ post.url | absolute_url(site.url) }}</id><updated>{{ post.date | rfc3339 }}</updated></entry>
        {% endfor %}
        </feed>
        """,
    "src/404.html": """
        ---
        permalink: 404.html
        ---
        <h1>Lost</h1>
        """,
}


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Write the sample site into ``tmp_path`` and return its root."""
    for name, text in SITE_FILES.items():
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(dedent(text).lstrip("\n"), encoding="utf-8")
    return tmp_path
