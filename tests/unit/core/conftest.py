"""Shared fixtures for core unit tests"""

import pytest
from markdown_it import MarkdownIt


SAMPLE_HTML = """\
<h1>Intro</h1>
<p>Read the <a href="https://example.com/docs">docs</a> first.</p>
<ul>
  <li>alpha</li>
  <li>beta</li>
</ul>
<pre><code>print(&quot;hi&quot;)</code></pre>
<p>Bye</p>
"""


@pytest.fixture(name="parser")
def parser_fixture():
    return MarkdownIt("commonmark")


@pytest.fixture(name="sample_html")
def sample_html_fixture():
    return SAMPLE_HTML
